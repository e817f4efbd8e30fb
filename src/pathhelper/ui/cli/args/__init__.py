"""Command line argument handling package."""

from pathhelper.ui.cli.args.parser import ArgumentParser
from pathhelper.ui.cli.args.options import AddArgs, CLIArgs, CountArgs, InspectArgs

__all__ = ["ArgumentParser", "AddArgs", "CLIArgs", "CountArgs", "InspectArgs"]
