"""
Summary: Split and join platform search-path strings without losing entries.
Why: Keep the list-separator convention in one place so round trips are exact.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar, final

from .errors import JoinError
from .models import PathList


@final
@dataclass(slots=True, frozen=True)
class PathListCodec:
    """Encode and decode separator-delimited path lists.

    ``quoting`` enables the Windows convention where a double-quoted run may
    contain the separator; quotes are stripped on split and rejected on join.
    """

    separator: str = os.pathsep
    quoting: bool = os.name == "nt"

    QUOTE: ClassVar[str] = '"'
    NUL: ClassVar[str] = "\0"

    @classmethod
    def for_platform(cls) -> "PathListCodec":
        """Return the codec matching the running platform."""

        return cls(separator=os.pathsep, quoting=os.name == "nt")

    def split(self, raw: str) -> PathList:
        """Split ``raw`` into entries.

        An empty string yields no entries. Empty segments between separators
        are kept as ``""``.
        """
        if raw == "":
            return ()
        if not self.quoting:
            return tuple(raw.split(self.separator))

        entries: list[str] = []
        current: list[str] = []
        in_quotes = False
        for char in raw:
            if char == self.QUOTE:
                in_quotes = not in_quotes
            elif char == self.separator and not in_quotes:
                entries.append("".join(current))
                current = []
            else:
                current.append(char)
        entries.append("".join(current))
        return tuple(entries)

    def join(self, entries: Iterable[str]) -> str:
        """Join ``entries`` with the separator.

        Raises:
            JoinError: If an entry contains a character that would corrupt the list.
        """
        items = list(entries)
        illegal = [self.separator, self.NUL]
        if self.quoting:
            illegal.append(self.QUOTE)
        for entry in items:
            for character in illegal:
                if character in entry:
                    raise JoinError(entry, character)
        return self.separator.join(items)


PLATFORM_CODEC = PathListCodec.for_platform()


def split(raw: str, codec: PathListCodec | None = None) -> PathList:
    """Split ``raw`` with ``codec`` or the platform codec."""

    return (codec or PLATFORM_CODEC).split(raw)


def join(entries: Iterable[str], codec: PathListCodec | None = None) -> str:
    """Join ``entries`` with ``codec`` or the platform codec."""

    return (codec or PLATFORM_CODEC).join(entries)


__all__ = ["PLATFORM_CODEC", "PathListCodec", "join", "split"]
