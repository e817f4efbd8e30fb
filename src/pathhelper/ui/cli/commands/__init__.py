"""Command execution package for CLI."""

from pathhelper.ui.cli.commands.edit import AddCommand, DedupCommand
from pathhelper.ui.cli.commands.executor import CommandExecutor
from pathhelper.ui.cli.commands.listing import CountCommand, ListCommand, ValidateCommand

__all__ = [
    "AddCommand",
    "CommandExecutor",
    "CountCommand",
    "DedupCommand",
    "ListCommand",
    "ValidateCommand",
]
