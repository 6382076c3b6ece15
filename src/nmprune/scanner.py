from __future__ import annotations

import logging
import os
from pathlib import Path

from nmprune.errors import InvalidRootError
from nmprune.models import TARGET_NAME, Match

logger = logging.getLogger(__name__)


def scan(root: Path, max_depth: int) -> list[Match]:
    """Collect every ``node_modules`` directory within ``max_depth`` of ``root``.

    The root sits at depth 0. Matched directories and symlinked directories
    are never entered, so nothing nested under a match is reported.
    """
    if max_depth < 0:
        raise ValueError(f"max_depth must be non-negative, got {max_depth}")
    root = Path(root).resolve()
    if not root.is_dir():
        raise InvalidRootError(f"Path does not exist or is not a directory: {root}")
    try:
        with os.scandir(root):
            pass
    except OSError as exc:
        raise InvalidRootError(f"Cannot read directory {root}: {exc.strerror or exc}") from exc

    matches: list[Match] = []
    for dirpath, dirnames, _filenames in os.walk(root, onerror=_log_unreadable):
        current = Path(dirpath)
        depth = _depth(root, current)
        if depth >= max_depth:
            dirnames[:] = []
            continue
        keep: list[str] = []
        for name in sorted(dirnames):
            child = current / name
            is_link = child.is_symlink()
            if name == TARGET_NAME:
                matches.append(
                    Match(
                        path=child,
                        depth=depth + 1,
                        rel_path=child.relative_to(root).as_posix(),
                        is_symlink=is_link,
                    )
                )
                logger.debug("matched %s at depth %d", child, depth + 1)
                continue
            if is_link:
                logger.debug("not following symlinked directory %s", child)
                continue
            keep.append(name)
        dirnames[:] = keep
    return matches


def _depth(root: Path, path: Path) -> int:
    if path == root:
        return 0
    return len(path.relative_to(root).parts)


def _log_unreadable(error: OSError) -> None:
    logger.warning("Error reading entry %s: %s", error.filename, error.strerror or error)
