"""src/pathhelper/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse environment access and service construction across commands.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Generic, TypeVar

from pathhelper.application.services.path_service import PathListService
from pathhelper.platform.environment import read_path_variable
from pathhelper.ui.cli.args.options import CLIArgs

ArgsT = TypeVar("ArgsT", bound=CLIArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    service: PathListService

    def __init__(
        self,
        args: ArgsT,
        *,
        service: PathListService | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            service: Service used to compute results; defaults to the filesystem-backed one.
            env: Environment mapping to read from instead of ``os.environ``.
        """
        self.args = args
        self.service = service or PathListService()
        self._env = env

    def read_raw(self) -> str:
        """Return the raw value of the configured variable.

        Raises:
            EnvironmentVariableMissingError: If the variable is not set.
        """
        return read_path_variable(self.args.variable, self._env)

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            Process exit status.
        """
        pass
