"""Read-only commands: ``list``, ``validate`` and ``count``."""

from __future__ import annotations

from typing import Any, final

from pathhelper.ui.cli.args.options import CountArgs, InspectArgs
from pathhelper.ui.cli.commands.executor import CommandExecutor
from pathhelper.ui.cli.display.entries import EntryDisplay
from pathhelper.ui.cli.display.report import ReportDisplay


@final
class ListCommand(CommandExecutor[InspectArgs]):
    """Print every entry with its resolution state."""

    def __init__(self, args: InspectArgs, **kwargs: Any) -> None:
        super().__init__(args, **kwargs)
        self.display = EntryDisplay()

    def execute(self) -> int:
        self.display.show_entries(self.service.list_entries(self.read_raw()))
        return 0


@final
class ValidateCommand(CommandExecutor[InspectArgs]):
    """Report inaccessible, empty and duplicated entries."""

    def __init__(self, args: InspectArgs, **kwargs: Any) -> None:
        super().__init__(args, **kwargs)
        self.display = ReportDisplay()

    def execute(self) -> int:
        self.display.show_report(self.service.validate(self.read_raw()))
        return 0


@final
class CountCommand(CommandExecutor[CountArgs]):
    """Print the number of files reachable in each entry."""

    def __init__(self, args: CountArgs, **kwargs: Any) -> None:
        super().__init__(args, **kwargs)
        self.display = EntryDisplay()

    def execute(self) -> int:
        counts = self.service.count_files(
            self.read_raw(),
            executables_only=self.args.executables_only,
        )
        self.display.show_counts(counts)
        return 0
