"""Command line interface package."""

from pathhelper.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
