from __future__ import annotations

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from nmprune.models import Match, Outcome, Summary

logger = logging.getLogger(__name__)


def remove(
    selection: Sequence[Match],
    silent: bool,
    console: Console | None = None,
) -> Summary:
    """Delete every selected match, isolating failures per item."""
    console = console or Console()
    summary = Summary()
    for match in selection:
        try:
            if match.is_symlink:
                match.path.unlink()
            else:
                _remove_tree(match.path)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            outcome = Outcome(match=match, status="failed", reason=reason)
            logger.info("failed to remove %s: %s", match.path, reason)
            if not silent:
                console.print(
                    f"[red]✗[/] {escape(match.rel_path)}: {escape(reason)}",
                    soft_wrap=True,
                )
        else:
            outcome = Outcome(match=match, status="removed")
            logger.info("removed %s", match.path)
            if not silent:
                console.print(f"[green]✓[/] {escape(match.rel_path)}", soft_wrap=True)
        summary.outcomes.append(outcome)

    if not silent:
        _print_summary(console, summary)
    return summary


def _remove_tree(root: Path) -> None:
    # Post-order walk on an explicit stack: a directory is pushed back once
    # with expanded=True and removed after all of its children.
    stack: list[tuple[Path, bool]] = [(root, False)]
    while stack:
        path, expanded = stack.pop()
        if expanded:
            os.rmdir(path)
            continue
        if path.is_symlink() or not path.is_dir():
            os.unlink(path)
            continue
        stack.append((path, True))
        with os.scandir(path) as entries:
            for entry in entries:
                stack.append((Path(entry.path), False))


def _print_summary(console: Console, summary: Summary) -> None:
    line = f"Removed {summary.removed_count} node_modules folder(s)"
    if summary.failed_count:
        line += f", [red]{summary.failed_count} failed[/]"
    console.print(line + ".", soft_wrap=True)
    for rel_path, reason in summary.failures:
        console.print(f"  - {escape(rel_path)}: {escape(reason)}", soft_wrap=True)
