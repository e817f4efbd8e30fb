"""Validation report rendering for CLI."""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.text import Text

from pathhelper.features.pathlist.domain.models import ValidationReport

from .styles import format_number, format_path


@final
class ReportDisplay:
    """Print one diagnostic line per validation finding."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False, emoji=False, soft_wrap=True)

    def show_report(self, report: ValidationReport) -> None:
        for entry in report.inaccessible:
            self.console.print(Text.assemble(format_path(entry, 2), " is not an accessible directory"))

        for entry in report.empty_directories:
            self.console.print(Text.assemble(format_path(entry, 1), " is empty"))

        if report.empty_entries:
            self.console.print(
                Text.assemble(
                    format_path("", 1),
                    " is included ",
                    format_number(report.empty_entries, 1),
                    " times (searches the current directory)",
                )
            )

        for group in report.verbatim_duplicates:
            self.console.print(
                Text.assemble(
                    format_path(group.value, 1),
                    " is included ",
                    format_number(group.occurrences, 1),
                    " times",
                )
            )

        for group in report.resolved_duplicates:
            self.console.print(
                Text.assemble(
                    format_path(group.value, 1),
                    " is included ",
                    format_number(group.occurrences, 1),
                    " times when entries are resolved",
                )
            )
