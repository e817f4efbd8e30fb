"""
Summary: Value objects describing path entries and per-command results.
Why: Share immutable records between use cases, services and displays.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TypeAlias

from .errors import AdditionError

PathEntry: TypeAlias = str
PathList: TypeAlias = tuple[PathEntry, ...]


class EntryCategory(str, Enum):
    """Display category of a single entry."""

    NORMAL = "normal"
    RESOLVES_ELSEWHERE = "resolves_elsewhere"
    INACCESSIBLE = "inaccessible"


class AddPosition(str, Enum):
    """Where new candidates are inserted."""

    APPEND = "append"
    PREPEND = "prepend"


@dataclass(slots=True, frozen=True)
class EntryStatus:
    """Resolution state of one entry as shown by ``list``."""

    entry: PathEntry
    category: EntryCategory
    canonical: str | None = None


@dataclass(slots=True, frozen=True)
class EntryCount:
    """Regular-file count for one entry; ``count`` is ``None`` when the probe failed."""

    entry: PathEntry
    count: int | None
    error: str | None = None

    @property
    def is_empty(self) -> bool:
        return self.count == 0


@dataclass(slots=True, frozen=True)
class DuplicateGroup:
    """A repeated value and how many times it appears in total."""

    value: str
    occurrences: int


@dataclass(slots=True, frozen=True)
class ValidationReport:
    """Findings collected by ``validate``."""

    inaccessible: tuple[PathEntry, ...] = ()
    empty_directories: tuple[PathEntry, ...] = ()
    empty_entries: int = 0
    verbatim_duplicates: tuple[DuplicateGroup, ...] = ()
    resolved_duplicates: tuple[DuplicateGroup, ...] = ()

    @property
    def is_clean(self) -> bool:
        return not (
            self.inaccessible
            or self.empty_directories
            or self.empty_entries
            or self.verbatim_duplicates
            or self.resolved_duplicates
        )


@dataclass(slots=True, frozen=True)
class DedupResult:
    """Deduplicated entries with their joined form."""

    entries: PathList
    value: str
    removed: int


@dataclass(slots=True)
class AdditionOutcome:
    """Result of adding one or more candidates to a path list."""

    entries: PathList
    accepted: list[PathEntry] = field(default_factory=list)
    rejected: list[AdditionError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.rejected


__all__ = [
    "AddPosition",
    "AdditionOutcome",
    "DedupResult",
    "DuplicateGroup",
    "EntryCategory",
    "EntryCount",
    "EntryStatus",
    "PathEntry",
    "PathList",
    "ValidationReport",
]
