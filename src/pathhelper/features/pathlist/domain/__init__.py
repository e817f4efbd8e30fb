"""
Summary: Domain records, errors and the path-list codec.
Why: Keep pure value types free of filesystem access.
"""

from .codec import PLATFORM_CODEC, PathListCodec, join, split
from .errors import (
    AdditionError,
    CandidateAlreadyPresentError,
    CandidateNotDirectoryError,
    ClashKind,
    EnvironmentVariableMissingError,
    JoinError,
    PathEncodingError,
    PathListError,
    ProbeError,
)
from .models import (
    AddPosition,
    AdditionOutcome,
    DedupResult,
    DuplicateGroup,
    EntryCategory,
    EntryCount,
    EntryStatus,
    PathEntry,
    PathList,
    ValidationReport,
)

__all__ = [
    "PLATFORM_CODEC",
    "AddPosition",
    "AdditionError",
    "AdditionOutcome",
    "CandidateAlreadyPresentError",
    "CandidateNotDirectoryError",
    "ClashKind",
    "DedupResult",
    "DuplicateGroup",
    "EntryCategory",
    "EntryCount",
    "EntryStatus",
    "EnvironmentVariableMissingError",
    "JoinError",
    "PathEncodingError",
    "PathEntry",
    "PathList",
    "PathListCodec",
    "PathListError",
    "ProbeError",
    "ValidationReport",
    "join",
    "split",
]
