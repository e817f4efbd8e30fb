"""
Summary: Remove verbatim and resolution-equal duplicates while preserving order.
Why: Produce a clean path list where the first occurrence of each location wins.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..domain.models import PathList
from .ports import DEFAULT_RESOLVER, ResolverPort, canonical_with


def dedup(entries: Iterable[str], resolver: ResolverPort = DEFAULT_RESOLVER) -> PathList:
    """Return the entries with later aliases dropped.

    An entry survives only if neither its literal text nor its canonical form
    has been seen; both forms of every survivor are remembered.
    """
    seen: set[str] = set()
    unique: list[str] = []
    for entry in entries:
        canonical = canonical_with(resolver, entry)
        if entry in seen or canonical in seen:
            continue
        unique.append(entry)
        seen.add(entry)
        seen.add(canonical)
    return tuple(unique)


__all__ = ["dedup"]
