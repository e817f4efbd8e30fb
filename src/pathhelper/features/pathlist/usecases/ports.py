"""
Summary: Ports describing how path-list use cases reach the filesystem.
Why: Allow tests and callers to swap resolution without touching the use cases.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, final, runtime_checkable

from . import probe


@runtime_checkable
class ResolverPort(Protocol):
    """Resolve entries to canonical locations."""

    def resolve(self, entry: str) -> Path | None:
        """Return the canonical path for ``entry`` or ``None`` when unresolvable."""
        ...

    def is_directory(self, entry: str) -> bool:
        """Return whether ``entry`` resolves to an existing directory."""
        ...


@final
class FilesystemResolver:
    """Resolver backed by the real filesystem."""

    def resolve(self, entry: str) -> Path | None:
        return probe.resolve(entry)

    def is_directory(self, entry: str) -> bool:
        return probe.exists_as_directory(entry)


DEFAULT_RESOLVER: ResolverPort = FilesystemResolver()


def canonical_with(resolver: ResolverPort, entry: str) -> str:
    """Canonical text of ``entry`` using ``resolver``, falling back to the entry."""

    return probe.canonical_form(entry, resolver.resolve)


__all__ = ["DEFAULT_RESOLVER", "FilesystemResolver", "ResolverPort", "canonical_with"]
