from __future__ import annotations

from pathlib import Path

import pytest


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


@pytest.fixture
def project_tree(tmp_path: Path) -> Path:
    _write(tmp_path / "proj" / "node_modules" / "a.txt", "a")
    _write(tmp_path / "proj" / "sub" / "node_modules" / "b.txt", "b")
    return tmp_path / "proj"
