"""
Summary: Exercise verbatim and resolution-based duplicate detection.
Why: Confirm repeat counts and reporting order for both identity views.
"""

from __future__ import annotations

from typing import Any

from pathhelper.features.pathlist.domain.models import DuplicateGroup
from pathhelper.features.pathlist.usecases.duplicates import (
    find_resolved_duplicates,
    find_verbatim_duplicates,
    group_duplicates,
    has_duplicates,
)

ENTRIES = ("/usr/local/bin", "/usr/local/sbin", "/usr/bin", "/bin", "/usr/local/bin")


def test_find_verbatim_duplicates_reports_repeats() -> None:
    assert find_verbatim_duplicates(ENTRIES) == ["/usr/local/bin"]


def test_value_seen_k_times_is_reported_k_minus_one_times() -> None:
    entries = ["/a", "/b", "/a", "/c", "/a", "/b"]

    assert find_verbatim_duplicates(entries) == ["/a", "/a", "/b"]
    assert find_verbatim_duplicates(entries).count("/a") == 2


def test_no_duplicates() -> None:
    assert find_verbatim_duplicates(["/a", "/b"]) == []
    assert not has_duplicates(["/a", "/b"])
    assert has_duplicates(ENTRIES)


def test_resolved_duplicates_report_canonical_form(stub_resolver: Any) -> None:
    """Different literal entries aliasing one directory are reported by target."""

    resolver = stub_resolver(
        aliases={"/bin": "/usr/bin", "/usr/bin": "/usr/bin", "/sbin": "/usr/sbin"},
    )
    entries = ["/usr/bin", "/sbin", "/bin", "/bin"]

    assert find_resolved_duplicates(entries, resolver) == ["/usr/bin", "/usr/bin"]


def test_unresolvable_entries_compare_literally(stub_resolver: Any) -> None:
    resolver = stub_resolver()

    assert find_resolved_duplicates(["/gone", "/other", "/gone"], resolver) == ["/gone"]


def test_group_duplicates_counts_total_occurrences() -> None:
    groups = group_duplicates(["/b", "/a", "/b"])

    assert groups == [
        DuplicateGroup(value="/b", occurrences=3),
        DuplicateGroup(value="/a", occurrences=2),
    ]
    assert group_duplicates([]) == []
