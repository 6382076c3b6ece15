"""
Selection of which matches get removed.

Interactive prompting lives behind the ``Chooser`` protocol so the rest of
the pipeline can be driven without a terminal.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol

from rich.console import Console
from rich.markup import escape
from rich.prompt import Prompt
from rich.table import Table

from nmprune.errors import SelectionAborted
from nmprune.models import Match

logger = logging.getLogger(__name__)

ALL_ANSWERS = {"a", "all", "*"}
NONE_ANSWERS = {"n", "none"}
CANCEL_ANSWERS = {"q", "quit"}


class Chooser(Protocol):
    def choose(self, matches: Sequence[Match]) -> list[Match]:
        """Return the matches the operator wants removed."""
        ...


class PromptChooser:
    """Numbered table plus a selection prompt, rendered with rich."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def choose(self, matches: Sequence[Match]) -> list[Match]:
        table = Table(title="Select node_modules folders to clean")
        table.add_column("#", justify="right")
        table.add_column("Path")
        for index, match in enumerate(matches, start=1):
            table.add_row(str(index), escape(match.rel_path))
        self.console.print(table)

        while True:
            try:
                answer = Prompt.ask(
                    "Entries to remove ([bold]a[/]ll, [bold]n[/]one, [bold]q[/]uit, or e.g. 1,3-4)",
                    console=self.console,
                    default="a",
                )
            except (KeyboardInterrupt, EOFError) as exc:
                raise SelectionAborted("selection cancelled") from exc
            try:
                indices = parse_selection(answer, len(matches))
            except ValueError as exc:
                self.console.print(f"[red]{escape(str(exc))}[/]")
                continue
            if indices is None:
                raise SelectionAborted("selection cancelled")
            chosen = set(indices)
            return [m for i, m in enumerate(matches, start=1) if i in chosen]


def parse_selection(text: str, count: int) -> list[int] | None:
    """Parse a selection expression into sorted 1-based indices.

    Returns ``None`` when the answer asks to cancel.
    """
    answer = text.strip().lower()
    if answer in CANCEL_ANSWERS:
        return None
    if answer in ALL_ANSWERS:
        return list(range(1, count + 1))
    if answer in NONE_ANSWERS or not answer:
        return []

    picked: set[int] = set()
    for part in answer.replace(" ", "").split(","):
        if not part:
            continue
        if "-" in part:
            start_text, _, end_text = part.partition("-")
            if not start_text.isdigit() or not end_text.isdigit():
                raise ValueError(f"Invalid range: {part!r}")
            start, end = int(start_text), int(end_text)
            if start > end:
                raise ValueError(f"Invalid range: {part!r}")
            values = range(start, end + 1)
        else:
            if not part.isdigit():
                raise ValueError(f"Invalid entry: {part!r}")
            values = range(int(part), int(part) + 1)
        for value in values:
            if not 1 <= value <= count:
                raise ValueError(f"Entry {value} is out of range (1-{count})")
            picked.add(value)
    return sorted(picked)


def select(
    matches: Sequence[Match],
    interactive: bool,
    chooser: Chooser | None = None,
) -> list[Match]:
    if not interactive:
        return list(matches)
    chooser = chooser or PromptChooser()
    try:
        chosen = chooser.choose(matches)
    except SelectionAborted:
        logger.info("selection aborted by operator")
        return []
    # Choosers may return entries in any order; keep scan order.
    wanted = {m.path for m in chosen}
    return [m for m in matches if m.path in wanted]
