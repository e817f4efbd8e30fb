"""src/pathhelper/application/services/path_service.py
What: Orchestrate path-list use cases into per-command results.
Why: Keep CLI commands thin and free of filesystem policy.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import final

from pathhelper.features.pathlist.domain.codec import PLATFORM_CODEC, PathListCodec
from pathhelper.features.pathlist.domain.errors import ProbeError
from pathhelper.features.pathlist.domain.models import (
    AdditionOutcome,
    AddPosition,
    DedupResult,
    DuplicateGroup,
    EntryCount,
    EntryStatus,
    PathList,
    ValidationReport,
)
from pathhelper.features.pathlist.usecases.additions import add_candidates
from pathhelper.features.pathlist.usecases.dedup import dedup
from pathhelper.features.pathlist.usecases.duplicates import (
    find_resolved_duplicates,
    find_verbatim_duplicates,
    group_duplicates,
    has_duplicates,
)
from pathhelper.features.pathlist.usecases.ports import DEFAULT_RESOLVER, ResolverPort
from pathhelper.features.pathlist.usecases.probe import classify, count_regular_files, is_empty
from pathhelper.platform.logging import logger


@final
class PathListService:
    """Application service that turns a raw path-list string into command results."""

    def __init__(
        self,
        codec: PathListCodec | None = None,
        resolver: ResolverPort | None = None,
    ) -> None:
        self._codec = codec or PLATFORM_CODEC
        self._resolver = resolver or DEFAULT_RESOLVER

    @property
    def codec(self) -> PathListCodec:
        return self._codec

    def parse(self, raw: str) -> PathList:
        """Split ``raw`` into entries."""

        return self._codec.split(raw)

    def join(self, entries: Iterable[str]) -> str:
        """Join ``entries`` back into a path-list string."""

        return self._codec.join(entries)

    def list_entries(self, raw: str) -> list[EntryStatus]:
        """Classify every entry for the ``list`` command."""

        return [classify(entry, self._resolver.resolve) for entry in self.parse(raw)]

    def validate(self, raw: str) -> ValidationReport:
        """Collect missing, empty and duplicated entries.

        Empty entries are only counted; they are left out of the probes and
        duplicate scans. Listing failures mark an entry inaccessible instead
        of aborting.
        """
        entries = self.parse(raw)
        named = [entry for entry in entries if entry != ""]
        inaccessible: list[str] = []
        empty_directories: list[str] = []
        empty_entries = 0

        for entry in entries:
            if entry == "":
                empty_entries += 1
                continue
            if not self._resolver.is_directory(entry):
                inaccessible.append(entry)
                continue
            try:
                if is_empty(entry):
                    empty_directories.append(entry)
            except ProbeError as exc:
                logger.debug(
                    "Probe failed for %s: %s",
                    entry,
                    exc,
                    extra={"path_event": "pathlist.probe.failed", "entry": entry},
                )
                inaccessible.append(entry)

        verbatim: tuple[DuplicateGroup, ...] = ()
        if has_duplicates(named):
            verbatim = tuple(group_duplicates(find_verbatim_duplicates(named)))

        return ValidationReport(
            inaccessible=tuple(inaccessible),
            empty_directories=tuple(empty_directories),
            empty_entries=empty_entries,
            verbatim_duplicates=verbatim,
            resolved_duplicates=tuple(
                group_duplicates(find_resolved_duplicates(named, self._resolver))
            ),
        )

    def count_files(self, raw: str, *, executables_only: bool = False) -> list[EntryCount]:
        """Count regular files per entry; failed probes yield ``count=None``."""

        counts: list[EntryCount] = []
        for entry in self.parse(raw):
            try:
                count = count_regular_files(entry, executables_only=executables_only)
            except ProbeError as exc:
                logger.debug(
                    "Probe failed for %s: %s",
                    entry,
                    exc,
                    extra={"path_event": "pathlist.probe.failed", "entry": entry},
                )
                counts.append(EntryCount(entry=entry, count=None, error=str(exc)))
                continue
            counts.append(EntryCount(entry=entry, count=count))
        return counts

    def dedup(self, raw: str) -> DedupResult:
        """Deduplicate ``raw`` and report how many resolved duplicates were dropped."""

        entries = self.parse(raw)
        removed = len(find_resolved_duplicates(entries, self._resolver))
        unique = dedup(entries, self._resolver)
        return DedupResult(entries=unique, value=self.join(unique), removed=removed)

    def add(
        self,
        raw: str,
        additions: Iterable[str],
        position: AddPosition,
    ) -> AdditionOutcome:
        """Validate and add candidates given as (possibly joined) arguments.

        Each argument is split with the same codec, so ``/a:/b`` adds two
        candidates in that order.
        """
        candidates = [
            candidate for argument in additions for candidate in self._codec.split(argument)
        ]
        return add_candidates(self.parse(raw), candidates, position, self._resolver)


__all__ = ["PathListService"]
