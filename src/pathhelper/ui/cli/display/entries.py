"""src/pathhelper/ui/cli/display/entries.py
What: Render per-entry rows for the ``list`` and ``count`` commands.
Why: Keep colour choices for normal, aliased and broken entries in one place.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.text import Text

from pathhelper.features.pathlist.domain.models import EntryCategory, EntryCount, EntryStatus

from .styles import format_number, format_path


@final
class EntryDisplay:
    """Handles entry listings in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(highlight=False, emoji=False, soft_wrap=True)

    def show_entries(self, statuses: Sequence[EntryStatus]) -> None:
        """Print each entry, with its target when it resolves elsewhere."""

        for status in statuses:
            if status.category is EntryCategory.NORMAL:
                self.console.print(format_path(status.entry, 0))
            elif status.category is EntryCategory.RESOLVES_ELSEWHERE:
                line = Text.assemble(
                    format_path(status.entry, 1),
                    " -> ",
                    format_path(status.canonical or "", 0),
                )
                self.console.print(line)
            else:
                self.console.print(format_path(status.entry, 2))

    def show_counts(self, counts: Sequence[EntryCount]) -> None:
        """Print ``entry: count``; empty entries are highlighted and failures shown as ``--``."""

        for item in counts:
            if item.count is None:
                line = Text.assemble(format_path(item.entry, 2), ": ", "--")
            elif item.is_empty:
                line = Text.assemble(format_path(item.entry, 1), ": ", format_number(0, 1))
            else:
                line = Text.assemble(
                    format_path(item.entry, 0),
                    ": ",
                    format_number(item.count, 0),
                )
            self.console.print(line)
