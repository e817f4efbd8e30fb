"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from pathhelper.features.pathlist.domain.models import AddPosition


@final
@dataclass(slots=True)
class InspectArgs:
    """Command line arguments for ``list``, ``validate`` and ``dedup``."""

    command: Literal["list", "validate", "dedup"]
    variable: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class CountArgs:
    """Command line arguments for the ``count`` subcommand."""

    command: Literal["count"]
    variable: str
    verbose: bool
    quiet: bool
    executables_only: bool


@final
@dataclass(slots=True)
class AddArgs:
    """Command line arguments for the ``append`` or ``prepend`` subcommands."""

    command: Literal["append", "prepend"]
    variable: str
    verbose: bool
    quiet: bool
    paths: list[str]

    @property
    def position(self) -> AddPosition:
        return AddPosition(self.command)


CLIArgs = InspectArgs | CountArgs | AddArgs

__all__ = ["AddArgs", "CLIArgs", "CountArgs", "InspectArgs"]
