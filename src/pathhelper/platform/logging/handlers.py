"""Rich logging handler that renders path-list events.

Where: platform/logging/handlers.py
What: Style records carrying a ``path_event`` extra with icons and coloured paths.
Why: Keep diagnostic formatting out of the use cases and commands.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, ClassVar

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PathEventRichHandler(RichHandler):
    """Rich handler that renders structured path-list events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "pathlist.addition.accepted": ("✅", "green"),
        "pathlist.addition.rejected": ("⛔", "red"),
        "pathlist.dedup.removed": ("ℹ️", "bright_black"),
        "pathlist.probe.failed": ("⚠️", "yellow"),
    }
    _SEPARATOR_CHARS: ClassVar[frozenset[str]] = frozenset({"/", "\\"})

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with compact settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @classmethod
    def _style_path(cls, path: str) -> Text:
        """Colour separators magenta and path segments white."""

        text = Text()
        if path == "":
            _ = text.append("(empty entry)", style=Style(color="white", italic=True))
            return text
        for char in path:
            if char in cls._SEPARATOR_CHARS:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_path_event(self, record: logging.LogRecord) -> Text | None:
        event = getattr(record, "path_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        entry = getattr(record, "entry", None)
        if event == "pathlist.dedup.removed":
            removed = getattr(record, "removed", 0)
            _ = body.append(f"({removed} resolved duplicate entries removed)")
        elif event == "pathlist.addition.accepted":
            _ = body.append("Added ")
            if isinstance(entry, str):
                _ = body.append_text(self._style_path(entry))
            position = getattr(record, "position", None)
            if position:
                _ = body.append(f" [{position}]")
        elif event == "pathlist.addition.rejected":
            _ = body.append("Rejected ")
            if isinstance(entry, str):
                _ = body.append_text(self._style_path(entry))
            reason = getattr(record, "error_message", None)
            if reason:
                _ = body.append(f" ({reason})")
        else:
            _ = body.append(record.getMessage())

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for path-list events."""

        event_text = self._render_path_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["PathEventRichHandler"]
