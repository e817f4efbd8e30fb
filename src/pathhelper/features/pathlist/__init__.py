# Path: `src/pathhelper/features/pathlist/__init__.py`
# Summary: Export path-list domain and use case symbols.
# Why: Provide a stable import surface for the service layer and tests.

from .domain.codec import PLATFORM_CODEC, PathListCodec, join, split
from .domain.errors import (
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
from .domain.models import (
    AddPosition,
    AdditionOutcome,
    DedupResult,
    DuplicateGroup,
    EntryCategory,
    EntryCount,
    EntryStatus,
    PathList,
    ValidationReport,
)
from .usecases.additions import add_candidates, append, prepend, validate_addition
from .usecases.dedup import dedup
from .usecases.duplicates import (
    find_resolved_duplicates,
    find_verbatim_duplicates,
    group_duplicates,
)
from .usecases.ports import DEFAULT_RESOLVER, FilesystemResolver, ResolverPort
from .usecases.probe import classify, count_regular_files, exists_as_directory, is_empty

__all__ = [
    "PLATFORM_CODEC",
    "PathListCodec",
    "join",
    "split",
    "AdditionError",
    "CandidateAlreadyPresentError",
    "CandidateNotDirectoryError",
    "ClashKind",
    "EnvironmentVariableMissingError",
    "JoinError",
    "PathEncodingError",
    "PathListError",
    "ProbeError",
    "AddPosition",
    "AdditionOutcome",
    "DedupResult",
    "DuplicateGroup",
    "EntryCategory",
    "EntryCount",
    "EntryStatus",
    "PathList",
    "ValidationReport",
    "add_candidates",
    "append",
    "prepend",
    "validate_addition",
    "dedup",
    "find_resolved_duplicates",
    "find_verbatim_duplicates",
    "group_duplicates",
    "DEFAULT_RESOLVER",
    "FilesystemResolver",
    "ResolverPort",
    "classify",
    "count_regular_files",
    "exists_as_directory",
    "is_empty",
]
