"""Command line interface for pathhelper."""

import sys
from typing import final

from pathhelper.config.config import ConfigError
from pathhelper.features.pathlist.domain.errors import PathListError
from pathhelper.platform.logging import logger
from pathhelper.ui.cli.args import ArgumentParser
from pathhelper.ui.cli.args.options import AddArgs, CLIArgs, CountArgs, InspectArgs
from pathhelper.ui.cli.commands import (
    AddCommand,
    CommandExecutor,
    CountCommand,
    DedupCommand,
    ListCommand,
    ValidateCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def build_command(args: CLIArgs) -> CommandExecutor[CLIArgs]:
        """Pick the executor for the parsed arguments."""

        match args:
            case AddArgs():
                return AddCommand(args)
            case CountArgs():
                return CountCommand(args)
            case InspectArgs(command="validate"):
                return ValidateCommand(args)
            case InspectArgs(command="dedup"):
                return DedupCommand(args)
            case InspectArgs(command="list"):
                return ListCommand(args)
            case _:
                raise TypeError(f"Unsupported command arguments: {args!r}")

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            status = CommandProcessor.build_command(args).execute()
            if status != 0:
                sys.exit(status)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except ConfigError as e:
            logger.error("%s", e)
            sys.exit(2)
        except PathListError as e:
            logger.error("%s", e)
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Failures exit through
        ``sys.exit(...)`` inside command processing.
    """
    CommandProcessor.process_command()
    return 0
