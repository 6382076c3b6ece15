from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

TARGET_NAME = "node_modules"
DEFAULT_DEPTH = 2


@dataclass(frozen=True)
class SearchConfig:
    root: Path
    max_depth: int = DEFAULT_DEPTH
    interactive: bool = False
    silent: bool = False

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")


@dataclass(frozen=True)
class Match:
    path: Path
    depth: int
    rel_path: str
    is_symlink: bool = False


@dataclass(frozen=True)
class Outcome:
    match: Match
    status: str  # "removed" or "failed"
    reason: str | None = None


@dataclass
class Summary:
    outcomes: list[Outcome] = field(default_factory=list)

    @property
    def removed_count(self) -> int:
        return sum(1 for o in self.outcomes if o.status == "removed")

    @property
    def failed_count(self) -> int:
        return sum(1 for o in self.outcomes if o.status == "failed")

    @property
    def failures(self) -> list[tuple[str, str]]:
        return [
            (o.match.rel_path, o.reason or "unknown error")
            for o in self.outcomes
            if o.status == "failed"
        ]

    @property
    def ok(self) -> bool:
        return self.failed_count == 0
