"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from pathhelper import __version__
from pathhelper.config.config import Config
from pathhelper.platform.logging import logger, setup_logger
from pathhelper.ui.cli.args.options import AddArgs, CLIArgs, CountArgs, InspectArgs

_DEFAULT_COMMAND = "list"


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="pathhelper",
            description="Inspect and edit PATH-style search-path variables.",
            epilog=(
                "dedup, append and prepend print the new value; apply it with e.g.\n"
                '  export PATH="$(pathhelper dedup)"'
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}",
        )
        ArgumentParser._add_common_options(parser, suppress_defaults=False)

        subparsers = parser.add_subparsers(dest="command", required=False, metavar="COMMAND")

        list_parser = subparsers.add_parser("list", help="List entries (default)")
        ArgumentParser._add_common_options(list_parser, suppress_defaults=True)

        validate_parser = subparsers.add_parser(
            "validate",
            help="Check for duplicate entries, non-existing or empty directories",
        )
        ArgumentParser._add_common_options(validate_parser, suppress_defaults=True)

        dedup_parser = subparsers.add_parser(
            "dedup",
            help="Remove any duplicate entries and print the result",
        )
        ArgumentParser._add_common_options(dedup_parser, suppress_defaults=True)

        count_parser = subparsers.add_parser("count", help="Count files in each entry")
        ArgumentParser._add_common_options(count_parser, suppress_defaults=True)
        _ = count_parser.add_argument(
            "--executables",
            action="store_true",
            help="Only count files the current user may execute",
        )

        for name, where in (("append", "end"), ("prepend", "front")):
            add_parser = subparsers.add_parser(
                name,
                help=f"Add one or more directories to the {where} and print the result",
            )
            ArgumentParser._add_common_options(add_parser, suppress_defaults=True)
            _ = add_parser.add_argument(
                "paths",
                nargs="+",
                metavar="PATH",
                help="Directory to add; several may be joined with the list separator",
            )

        return parser

    @staticmethod
    def _add_common_options(
        parser: argparse.ArgumentParser,
        *,
        suppress_defaults: bool,
    ) -> None:
        """Register options accepted both before and after the subcommand.

        Subparsers suppress their defaults so values given before the
        subcommand are not overwritten.
        """
        flag_default: object = argparse.SUPPRESS if suppress_defaults else False
        variable_default: object = argparse.SUPPRESS if suppress_defaults else None

        _ = parser.add_argument(
            "-e",
            "--variable",
            type=str,
            default=variable_default,
            metavar="NAME",
            help="Environment variable to inspect (defaults to PATH or the configured value)",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            default=flag_default,
            help="Show detailed diagnostic information",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            default=flag_default,
            help="Suppress all log output except errors",
        )

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If argument validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))
        if is_quiet and is_verbose:
            parser.error("--verbose and --quiet are mutually exclusive")

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        _ = setup_logger(log_file=configuration.log_file, console_level=log_level)

        command: str = parsed_args.command or _DEFAULT_COMMAND
        variable: str = parsed_args.variable or configuration.variable

        if command in {"list", "validate", "dedup"}:
            return InspectArgs(
                command=command,  # pyright: ignore[reportArgumentType]
                variable=variable,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "count":
            return CountArgs(
                command="count",
                variable=variable,
                verbose=is_verbose,
                quiet=is_quiet,
                executables_only=bool(parsed_args.executables)
                or configuration.count_executables_only,
            )

        if command in {"append", "prepend"}:
            return AddArgs(
                command=command,  # pyright: ignore[reportArgumentType]
                variable=variable,
                verbose=is_verbose,
                quiet=is_quiet,
                paths=list(parsed_args.paths),
            )

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
