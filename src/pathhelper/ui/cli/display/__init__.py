"""Display management for CLI interface."""

from pathhelper.ui.cli.display.entries import EntryDisplay
from pathhelper.ui.cli.display.output import ValueOutput
from pathhelper.ui.cli.display.report import ReportDisplay

__all__ = ["EntryDisplay", "ReportDisplay", "ValueOutput"]
