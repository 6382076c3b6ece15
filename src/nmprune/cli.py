from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from rich.console import Console

from nmprune import __version__
from nmprune.errors import InvalidRootError
from nmprune.logging_utils import configure_logging
from nmprune.models import DEFAULT_DEPTH, SearchConfig, Summary
from nmprune.selector import Chooser, PromptChooser

logger = logging.getLogger(__name__)


def _depth(value: str) -> int:
    try:
        depth = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}") from exc
    if depth < 0:
        raise argparse.ArgumentTypeError(f"depth must be non-negative, got {depth}")
    return depth


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nmprune",
        description="Find node_modules folders below a directory and remove them.",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=_depth,
        default=DEFAULT_DEPTH,
        help=f"How deep to search for node_modules (default: {DEFAULT_DEPTH})",
    )
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Choose which folders to remove before deleting",
    )
    parser.add_argument(
        "-s",
        "--silent",
        action="store_true",
        help="Do not print progress or the final summary",
    )
    parser.add_argument(
        "-p",
        "--path",
        default=".",
        help="Directory to search (default: current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (repeatable)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    configure_logging(verbosity=args.verbose)

    root = Path(args.path).resolve()
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Path does not exist or is not a directory: {root}")

    config = SearchConfig(
        root=root,
        max_depth=args.depth,
        interactive=args.interactive,
        silent=args.silent,
    )
    try:
        summary = run(config)
    except InvalidRootError as exc:
        raise SystemExit(str(exc)) from exc
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130
    return 0 if summary.ok else 1


def run(
    config: SearchConfig,
    chooser: Chooser | None = None,
    console: Console | None = None,
) -> Summary:
    """Scan, select and remove according to ``config``."""
    from nmprune.remover import remove
    from nmprune.scanner import scan
    from nmprune.selector import select

    console = console or Console()
    matches = scan(config.root, config.max_depth)
    logger.info("found %d node_modules folder(s) under %s", len(matches), config.root)
    if not matches:
        if not config.silent:
            console.print("No node_modules folders found.")
        return Summary()

    if config.interactive and chooser is None:
        chooser = PromptChooser(console)
    selection = select(matches, config.interactive, chooser=chooser)
    if not selection and not config.silent:
        console.print("Nothing selected.")

    return remove(selection, config.silent, console=console)


if __name__ == "__main__":
    raise SystemExit(main())
