"""Environment access for the source path-list string.

Where: platform/environment.py
What: Read the raw variable and check values before they are printed.
Why: Confine process-environment access to one adapter so the core stays pure.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

from pathhelper.config.config import DEFAULT_VARIABLE
from pathhelper.features.pathlist.domain.errors import (
    EnvironmentVariableMissingError,
    PathEncodingError,
)


def read_path_variable(
    name: str = DEFAULT_VARIABLE,
    env: Mapping[str, str] | None = None,
) -> str:
    """Return the raw value of ``name`` from ``env`` or ``os.environ``.

    Raises:
        EnvironmentVariableMissingError: If the variable is not set.
    """
    mapping = env if env is not None else os.environ
    value = mapping.get(name)
    if value is None:
        raise EnvironmentVariableMissingError(name)
    return value


def ensure_printable(value: str) -> str:
    """Return ``value`` unchanged if it encodes as UTF-8.

    Undecodable bytes read from the environment survive as surrogate escapes;
    such values cannot be printed faithfully for a shell to consume.

    Raises:
        PathEncodingError: If ``value`` holds surrogate escapes.
    """
    try:
        _ = value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise PathEncodingError(value) from exc
    return value


def display_text(value: str) -> str:
    """Render ``value`` for humans, escaping bytes that are not valid text."""

    try:
        raw = value.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        raw = value.encode("utf-8", "backslashreplace")
    return raw.decode("utf-8", "backslashreplace")


__all__ = ["display_text", "ensure_printable", "read_path_variable"]
