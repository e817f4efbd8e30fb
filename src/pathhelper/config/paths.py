"""Shared path utilities for configuration and log locations.

Policy:
- Config: ``$PATHHELPER_CONFIG`` when set, else
  ``$XDG_CONFIG_HOME/pathhelper/config.toml`` (``~/.config`` by default).
- Logs: ``$XDG_STATE_HOME/pathhelper/pathhelper.log`` (``~/.local/state`` by
  default), used only when file logging is enabled in the config.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Final

APP_NAME: Final[str] = "pathhelper"

_ENV_CONFIG_FILE: Final[str] = "PATHHELPER_CONFIG"
_ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"
_ENV_XDG_STATE_HOME: Final[str] = "XDG_STATE_HOME"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _xdg_home(env_var: str, fallback: str, env: Mapping[str, str] | None) -> Path:
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=env_var,
        default_factory=lambda: Path.home() / fallback,
    )


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: _xdg_home(_ENV_XDG_CONFIG_HOME, ".config", env)
        / APP_NAME
        / "config.toml",
    )


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the default directory for log files."""

    return _xdg_home(_ENV_XDG_STATE_HOME, ".local/state", env) / APP_NAME


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    """Get the default log file path."""

    return default_log_dir(env) / f"{APP_NAME}.log"


__all__ = [
    "APP_NAME",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
