"""
Summary: Probe path entries on the filesystem (resolution, directory checks, counts).
Why: Downgrade per-entry I/O failures to simple outcomes the callers can render.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from ..domain.errors import ProbeError
from ..domain.models import EntryCategory, EntryStatus


def resolve(entry: str) -> Path | None:
    """Resolve symlinks in ``entry`` and return its canonical absolute path.

    Missing targets, permission errors, symlink loops and malformed entries
    all yield ``None``. An empty entry resolves like ``.``.
    """
    try:
        return Path(entry).resolve(strict=True)
    except (OSError, RuntimeError, ValueError):
        return None


def canonical_form(
    entry: str,
    resolve_entry: Callable[[str], Path | None] = resolve,
) -> str:
    """Return the resolved text of ``entry``, or ``entry`` itself when unresolvable."""

    resolved = resolve_entry(entry)
    return entry if resolved is None else str(resolved)


def exists_as_directory(entry: str) -> bool:
    """Check that ``entry`` resolves and currently points at a directory."""

    resolved = resolve(entry)
    if resolved is None:
        return False
    try:
        return resolved.is_dir()
    except OSError:
        return False


def _is_counted(child: Path, executables_only: bool) -> bool:
    resolved = resolve(str(child))
    if resolved is None:
        return False
    try:
        if not resolved.is_file():
            return False
    except OSError:
        return False
    return not executables_only or os.access(resolved, os.X_OK)


def count_regular_files(entry: str, *, executables_only: bool = False) -> int:
    """Count the immediate children of ``entry`` that resolve to regular files.

    Args:
        entry: Directory entry taken from the path list.
        executables_only: Only count files the current user may execute.

    Returns:
        int: Number of matching files; ``0`` for an empty but readable directory.

    Raises:
        ProbeError: If the directory cannot be listed.
    """
    try:
        with os.scandir(Path(entry)) as iterator:
            children = [Path(item.path) for item in iterator]
    except OSError as exc:
        raise ProbeError(entry, exc) from exc

    return sum(1 for child in children if _is_counted(child, executables_only))


def is_empty(entry: str) -> bool:
    """Return whether ``entry`` holds no regular files; propagates ``ProbeError``."""

    return count_regular_files(entry) == 0


def classify(
    entry: str,
    resolve_entry: Callable[[str], Path | None] = resolve,
) -> EntryStatus:
    """Categorise ``entry`` for display."""

    resolved = resolve_entry(entry)
    if resolved is None:
        return EntryStatus(entry=entry, category=EntryCategory.INACCESSIBLE)

    canonical = str(resolved)
    if canonical == entry:
        return EntryStatus(entry=entry, category=EntryCategory.NORMAL, canonical=canonical)
    return EntryStatus(
        entry=entry,
        category=EntryCategory.RESOLVES_ELSEWHERE,
        canonical=canonical,
    )


__all__ = [
    "canonical_form",
    "classify",
    "count_regular_files",
    "exists_as_directory",
    "is_empty",
    "resolve",
]
