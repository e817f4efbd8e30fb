"""
Summary: Detect entries repeated verbatim or after symlink resolution.
Why: Report both views of duplication in encounter order with single-pass scans.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from ..domain.models import DuplicateGroup
from .ports import DEFAULT_RESOLVER, ResolverPort, canonical_with


def find_verbatim_duplicates(entries: Iterable[str]) -> list[str]:
    """Return every entry whose literal text was already seen, once per repeat."""

    seen: set[str] = set()
    duplicates: list[str] = []
    for entry in entries:
        if entry in seen:
            duplicates.append(entry)
        else:
            seen.add(entry)
    return duplicates


def find_resolved_duplicates(
    entries: Iterable[str],
    resolver: ResolverPort = DEFAULT_RESOLVER,
) -> list[str]:
    """Return the canonical form of every entry whose resolution was already seen.

    Unresolvable entries are compared by their literal text.
    """
    return find_verbatim_duplicates(canonical_with(resolver, entry) for entry in entries)


def has_duplicates(entries: Sequence[str]) -> bool:
    """Whether any entry repeats verbatim."""

    return len(set(entries)) != len(entries)


def group_duplicates(duplicates: Iterable[str]) -> list[DuplicateGroup]:
    """Group a duplicate report by value.

    ``occurrences`` counts the first appearance too, so a value reported
    ``n`` times appears ``n + 1`` times in the list. Groups keep the order in
    which values were first reported.
    """
    repeats = Counter(duplicates)
    return [DuplicateGroup(value=value, occurrences=count + 1) for value, count in repeats.items()]


__all__ = [
    "find_resolved_duplicates",
    "find_verbatim_duplicates",
    "group_duplicates",
    "has_duplicates",
]
