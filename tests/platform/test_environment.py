"""Tests for environment access helpers."""

from __future__ import annotations

import pytest

from pathhelper.features.pathlist.domain.errors import (
    EnvironmentVariableMissingError,
    PathEncodingError,
)
from pathhelper.platform.environment import display_text, ensure_printable, read_path_variable


def test_read_path_variable_from_mapping() -> None:
    assert read_path_variable("PATH", {"PATH": "/bin:/usr/bin"}) == "/bin:/usr/bin"


def test_read_path_variable_allows_empty_value() -> None:
    assert read_path_variable("PATH", {"PATH": ""}) == ""


def test_read_path_variable_missing() -> None:
    with pytest.raises(EnvironmentVariableMissingError) as excinfo:
        _ = read_path_variable("MANPATH", {})
    assert excinfo.value.name == "MANPATH"
    assert "MANPATH" in str(excinfo.value)


def test_read_path_variable_defaults_to_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATHHELPER_TEST_VARIABLE", "/opt/bin")

    assert read_path_variable("PATHHELPER_TEST_VARIABLE") == "/opt/bin"


def test_ensure_printable_accepts_text() -> None:
    assert ensure_printable("/usr/bin:/ünïcödé") == "/usr/bin:/ünïcödé"


def test_ensure_printable_rejects_undecodable_bytes() -> None:
    value = b"/opt/\xff/bin".decode("utf-8", "surrogateescape")

    with pytest.raises(PathEncodingError) as excinfo:
        _ = ensure_printable(value)
    assert excinfo.value.value == value


def test_display_text_escapes_undecodable_bytes() -> None:
    value = b"/opt/\xff/bin".decode("utf-8", "surrogateescape")

    assert display_text(value) == "/opt/\\xff/bin"
    assert display_text("/usr/bin") == "/usr/bin"
