"""Shared Rich styles for path-list output."""

from __future__ import annotations

from typing import Final

from rich.text import Text

from pathhelper.platform.environment import display_text

# Severity levels: 0 normal, 1 notable, 2 broken
PATH_STYLES: Final[dict[int, str]] = {0: "blue", 1: "yellow", 2: "red"}
NUMBER_STYLES: Final[dict[int, str]] = {0: "magenta", 1: "yellow", 2: "red"}
EMPTY_ENTRY_LABEL: Final[str] = "(empty entry)"


def format_path(path: str, level: int) -> Text:
    """Render ``path`` in the colour for ``level``; unknown levels are bold."""

    label = EMPTY_ENTRY_LABEL if path == "" else display_text(path)
    return Text(label, style=PATH_STYLES.get(level, "bold"))


def format_number(number: int, level: int) -> Text:
    """Render ``number`` in the colour for ``level``."""

    return Text(str(number), style=NUMBER_STYLES.get(level, "bold"))


__all__ = ["EMPTY_ENTRY_LABEL", "format_number", "format_path"]
