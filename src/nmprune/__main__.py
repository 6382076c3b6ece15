from nmprune.cli import main

raise SystemExit(main())
