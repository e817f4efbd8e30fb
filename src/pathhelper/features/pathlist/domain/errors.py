"""
Summary: Exception hierarchy raised by path-list parsing, probing and editing.
Why: Let callers separate per-entry failures from fatal structural errors.
"""

from __future__ import annotations

from enum import Enum
from typing import final


class PathListError(Exception):
    """Base class for every error raised by the path-list feature."""


@final
class EnvironmentVariableMissingError(PathListError):
    """Raised when the source variable is not present in the environment."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"unable to fetch {name} environment variable")


@final
class PathEncodingError(PathListError):
    """Raised when a value holds bytes that cannot be printed as text."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            "value contains symbols that cannot be encoded: "
            + value.encode("utf-8", "backslashreplace").decode("utf-8")
        )


@final
class JoinError(PathListError):
    """Raised when an entry cannot be represented in a joined path list."""

    def __init__(self, entry: str, character: str) -> None:
        self.entry = entry
        self.character = character
        super().__init__(
            f"unable to join path components: '{entry}' contains {character!r}"
        )


@final
class ProbeError(PathListError):
    """Raised when a directory listing for a single entry fails."""

    def __init__(self, entry: str, cause: OSError) -> None:
        self.entry = entry
        self.cause = cause
        reason = cause.strerror or type(cause).__name__
        super().__init__(f"unable to read '{entry}': {reason}")


class AdditionError(PathListError):
    """Base class for append/prepend validation failures."""

    def __init__(self, candidate: str, message: str) -> None:
        self.candidate = candidate
        super().__init__(message)


@final
class CandidateNotDirectoryError(AdditionError):
    """Raised when a candidate does not resolve to an existing directory."""

    def __init__(self, candidate: str) -> None:
        super().__init__(candidate, f"'{candidate}' is not an existing directory")


class ClashKind(str, Enum):
    """How a candidate collides with an entry already in the list."""

    LITERAL = "literal"
    RESOLVED = "resolved"


@final
class CandidateAlreadyPresentError(AdditionError):
    """Raised when a candidate is already part of the path list."""

    def __init__(
        self,
        candidate: str,
        *,
        kind: ClashKind,
        existing: str,
        resolved: str | None = None,
    ) -> None:
        self.kind = kind
        self.existing = existing
        self.resolved = resolved
        if kind is ClashKind.LITERAL:
            message = f"path list already contains '{candidate}'"
        else:
            message = (
                f"'{candidate}' resolves to '{resolved}', "
                f"which matches existing entry '{existing}'"
            )
        super().__init__(candidate, message)


__all__ = [
    "AdditionError",
    "CandidateAlreadyPresentError",
    "CandidateNotDirectoryError",
    "ClashKind",
    "EnvironmentVariableMissingError",
    "JoinError",
    "PathEncodingError",
    "PathListError",
    "ProbeError",
]
