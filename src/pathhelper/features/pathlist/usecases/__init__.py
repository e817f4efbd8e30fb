"""Path-list use cases."""

from .additions import (
    add_candidates,
    append,
    append_path,
    ensure_unique_addition,
    prepend,
    prepend_path,
    validate_addition,
)
from .dedup import dedup
from .duplicates import (
    find_resolved_duplicates,
    find_verbatim_duplicates,
    group_duplicates,
    has_duplicates,
)
from .ports import DEFAULT_RESOLVER, FilesystemResolver, ResolverPort, canonical_with
from .probe import (
    canonical_form,
    classify,
    count_regular_files,
    exists_as_directory,
    is_empty,
    resolve,
)

__all__ = [
    "DEFAULT_RESOLVER",
    "FilesystemResolver",
    "ResolverPort",
    "add_candidates",
    "append",
    "append_path",
    "canonical_form",
    "canonical_with",
    "classify",
    "count_regular_files",
    "dedup",
    "ensure_unique_addition",
    "exists_as_directory",
    "find_resolved_duplicates",
    "find_verbatim_duplicates",
    "group_duplicates",
    "has_duplicates",
    "is_empty",
    "prepend",
    "prepend_path",
    "resolve",
    "validate_addition",
]
