"""Plain output of computed path-list values."""

from __future__ import annotations

import sys
from typing import TextIO, final

from pathhelper.platform.environment import ensure_printable


@final
class ValueOutput:
    """Write a path-list value to stdout exactly as a shell should receive it.

    Bypasses Rich so no markup, emoji or wrapping can alter the value.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, value: str) -> None:
        """Print ``value`` followed by a newline.

        Raises:
            PathEncodingError: If ``value`` cannot be encoded for output.
        """
        stream = self._stream or sys.stdout
        _ = stream.write(ensure_printable(value) + "\n")
        stream.flush()
