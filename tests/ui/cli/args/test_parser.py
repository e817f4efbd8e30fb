"""Tests for command line argument parser."""

import logging
from argparse import Namespace
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from pathhelper.features.pathlist.domain.models import AddPosition
from pathhelper.ui.cli.args import AddArgs, ArgumentParser, CountArgs, InspectArgs


@pytest.fixture
def mock_setup_logger(mocker: MockerFixture) -> MagicMock:
    return mocker.patch("pathhelper.ui.cli.args.parser.setup_logger")


def test_create_parser() -> None:
    """Argument parser should expose expected subcommands and options."""

    parser = ArgumentParser.create_parser()

    no_command: Namespace = parser.parse_args([])
    assert no_command.command is None

    append_args: Namespace = parser.parse_args(["append", "/opt/bin", "/opt/sbin"])
    assert append_args.command == "append"
    assert append_args.paths == ["/opt/bin", "/opt/sbin"]

    count_args: Namespace = parser.parse_args(["count", "--executables"])
    assert count_args.executables


def test_add_commands_require_a_path() -> None:
    parser = ArgumentParser.create_parser()

    with pytest.raises(SystemExit):
        _ = parser.parse_args(["prepend"])


def test_process_args_defaults_to_list(mock_setup_logger: MagicMock) -> None:
    args = ArgumentParser.process_args([])

    assert isinstance(args, InspectArgs)
    assert args.command == "list"
    assert args.variable == "PATH"
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.INFO
    assert mock_setup_logger.call_args.kwargs["log_file"] is None


@pytest.mark.parametrize("position", ["before", "after"])
def test_common_options_before_or_after_subcommand(
    mock_setup_logger: MagicMock, position: str
) -> None:
    options = ["--variable", "MANPATH", "--verbose"]
    argv = [*options, "validate"] if position == "before" else ["validate", *options]

    args = ArgumentParser.process_args(argv)

    assert isinstance(args, InspectArgs)
    assert args.command == "validate"
    assert args.variable == "MANPATH"
    assert args.verbose
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.DEBUG


def test_quiet_sets_error_level(mock_setup_logger: MagicMock) -> None:
    args = ArgumentParser.process_args(["dedup", "--quiet"])

    assert isinstance(args, InspectArgs)
    assert args.quiet
    assert mock_setup_logger.call_args.kwargs["console_level"] == logging.ERROR


def test_verbose_and_quiet_conflict(mock_setup_logger: MagicMock) -> None:
    with pytest.raises(SystemExit):
        _ = ArgumentParser.process_args(["--verbose", "list", "--quiet"])


def test_process_args_add(mock_setup_logger: MagicMock) -> None:
    args = ArgumentParser.process_args(["prepend", "/opt/bin"])

    assert isinstance(args, AddArgs)
    assert args.paths == ["/opt/bin"]
    assert args.position is AddPosition.PREPEND


def test_process_args_uses_configuration(
    mock_setup_logger: MagicMock, mocker: MockerFixture
) -> None:
    mock_config = mocker.patch("pathhelper.ui.cli.args.parser.Config")
    custom_log_path = Path("/tmp/custom.log")
    mock_config.load.return_value.log_file = custom_log_path
    mock_config.load.return_value.variable = "MANPATH"
    mock_config.load.return_value.count_executables_only = True

    args = ArgumentParser.process_args(["count"])

    assert isinstance(args, CountArgs)
    assert args.variable == "MANPATH"
    assert args.executables_only
    assert mock_setup_logger.call_args.kwargs["log_file"] == custom_log_path
    mock_config.load.assert_called_once()


def test_explicit_variable_overrides_configuration(
    mock_setup_logger: MagicMock, mocker: MockerFixture
) -> None:
    mock_config = mocker.patch("pathhelper.ui.cli.args.parser.Config")
    mock_config.load.return_value.log_file = None
    mock_config.load.return_value.variable = "MANPATH"

    args = ArgumentParser.process_args(["-e", "INFOPATH", "list"])

    assert args.variable == "INFOPATH"
