"""
Summary: Validate and insert new directories at either end of a path list.
Why: Refuse additions that are missing or already reachable through another entry.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..domain.codec import PathListCodec, join, split
from ..domain.errors import (
    AdditionError,
    CandidateAlreadyPresentError,
    CandidateNotDirectoryError,
    ClashKind,
)
from ..domain.models import AdditionOutcome, AddPosition, PathList
from .ports import DEFAULT_RESOLVER, ResolverPort, canonical_with


def ensure_unique_addition(
    entries: Sequence[str],
    candidate: str,
    resolver: ResolverPort = DEFAULT_RESOLVER,
) -> None:
    """Raise ``CandidateAlreadyPresentError`` if ``candidate`` is already listed.

    The literal check runs first so an exact repeat is always reported as
    such, even when it would also match by resolution.
    """
    if candidate in entries:
        raise CandidateAlreadyPresentError(candidate, kind=ClashKind.LITERAL, existing=candidate)

    resolved = canonical_with(resolver, candidate)
    for existing in entries:
        if canonical_with(resolver, existing) == resolved:
            raise CandidateAlreadyPresentError(
                candidate,
                kind=ClashKind.RESOLVED,
                existing=existing,
                resolved=resolved,
            )


def validate_addition(
    entries: Sequence[str],
    candidate: str,
    resolver: ResolverPort = DEFAULT_RESOLVER,
) -> None:
    """Check that ``candidate`` is an existing directory not yet in ``entries``.

    Raises:
        CandidateNotDirectoryError: If the candidate is missing or not a directory.
        CandidateAlreadyPresentError: If the candidate clashes with an entry.
    """
    if not resolver.is_directory(candidate):
        raise CandidateNotDirectoryError(candidate)
    ensure_unique_addition(entries, candidate, resolver)


def append(entries: Sequence[str], candidate: str) -> PathList:
    """Return ``entries`` with ``candidate`` as the last element."""

    return (*entries, candidate)


def prepend(entries: Sequence[str], candidate: str) -> PathList:
    """Return ``entries`` with ``candidate`` as the first element."""

    return (candidate, *entries)


def append_path(
    path_var: str,
    addition: str,
    *,
    codec: PathListCodec | None = None,
    resolver: ResolverPort = DEFAULT_RESOLVER,
) -> str:
    """Validate ``addition`` against ``path_var`` and return the appended value."""

    entries = split(path_var, codec)
    validate_addition(entries, addition, resolver)
    return join(append(entries, addition), codec)


def prepend_path(
    path_var: str,
    addition: str,
    *,
    codec: PathListCodec | None = None,
    resolver: ResolverPort = DEFAULT_RESOLVER,
) -> str:
    """Validate ``addition`` against ``path_var`` and return the prepended value."""

    entries = split(path_var, codec)
    validate_addition(entries, addition, resolver)
    return join(prepend(entries, addition), codec)


def add_candidates(
    entries: Sequence[str],
    candidates: Iterable[str],
    position: AddPosition,
    resolver: ResolverPort = DEFAULT_RESOLVER,
) -> AdditionOutcome:
    """Add several candidates, validating each against the list built so far.

    A rejected candidate is recorded and skipped; the remaining candidates are
    still processed. Prepended candidates keep the order they were given in.
    Empty candidates are ignored.

    Args:
        entries: Current path list.
        candidates: Candidates in the order supplied by the user.
        position: Whether to append or prepend.
        resolver: Resolver used for existence and uniqueness checks.

    Returns:
        AdditionOutcome: Resulting entries plus accepted and rejected candidates.
    """
    current: PathList = tuple(entries)
    outcome = AdditionOutcome(entries=current)
    for candidate in candidates:
        if candidate == "":
            continue
        try:
            validate_addition(current, candidate, resolver)
        except AdditionError as exc:
            outcome.rejected.append(exc)
            continue

        if position is AddPosition.APPEND:
            current = append(current, candidate)
        else:
            insert_at = len(outcome.accepted)
            current = (*current[:insert_at], candidate, *current[insert_at:])
        outcome.accepted.append(candidate)

    outcome.entries = current
    return outcome


__all__ = [
    "add_candidates",
    "append",
    "append_path",
    "ensure_unique_addition",
    "prepend",
    "prepend_path",
    "validate_addition",
]
