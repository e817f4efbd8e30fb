"""src/pathhelper/ui/cli/commands/edit.py
What: Commands that compute a new value: ``dedup``, ``append`` and ``prepend``.
Why: Print shell-consumable values on stdout and keep notes on the log stream.
"""

from __future__ import annotations

from typing import Any, final

from pathhelper.platform.logging import logger
from pathhelper.ui.cli.args.options import AddArgs, InspectArgs
from pathhelper.ui.cli.commands.executor import CommandExecutor
from pathhelper.ui.cli.display.output import ValueOutput


@final
class DedupCommand(CommandExecutor[InspectArgs]):
    """Print the variable with duplicate and aliased entries removed."""

    def __init__(self, args: InspectArgs, **kwargs: Any) -> None:
        super().__init__(args, **kwargs)
        self.output = ValueOutput()

    def execute(self) -> int:
        result = self.service.dedup(self.read_raw())
        if result.removed:
            logger.info(
                "%d resolved duplicate entries removed",
                result.removed,
                extra={"path_event": "pathlist.dedup.removed", "removed": result.removed},
            )
        self.output.emit(result.value)
        return 0


@final
class AddCommand(CommandExecutor[AddArgs]):
    """Append or prepend validated directories and print the result.

    The resulting value is always printed, unchanged when every candidate was
    rejected, so ``export PATH="$(...)"`` never clears the variable. Any
    rejection makes the command exit with status 1.
    """

    def __init__(self, args: AddArgs, **kwargs: Any) -> None:
        super().__init__(args, **kwargs)
        self.output = ValueOutput()

    def execute(self) -> int:
        position = self.args.position
        outcome = self.service.add(self.read_raw(), self.args.paths, position)

        for candidate in outcome.accepted:
            logger.debug(
                "Added %s",
                candidate,
                extra={
                    "path_event": "pathlist.addition.accepted",
                    "entry": candidate,
                    "position": position.value,
                },
            )
        for error in outcome.rejected:
            logger.error(
                "%s",
                error,
                extra={
                    "path_event": "pathlist.addition.rejected",
                    "entry": error.candidate,
                    "error_message": str(error),
                },
            )

        self.output.emit(self.service.join(outcome.entries))
        return 0 if outcome.success else 1
