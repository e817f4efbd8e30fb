"""Shared pytest fixtures for configuration-focused tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_config(isolated_config: Path) -> Callable[[str], Path]:
    """Write TOML content to the isolated config location."""

    def _write(content: str) -> Path:
        isolated_config.parent.mkdir(parents=True, exist_ok=True)
        _ = isolated_config.write_text(content, encoding="utf-8")
        return isolated_config

    return _write
