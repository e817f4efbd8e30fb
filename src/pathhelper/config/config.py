"""Configuration management for pathhelper."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from pathhelper.config.paths import default_config_path, default_log_file

DEFAULT_VARIABLE: Final[str] = "PATH"

logger = logging.getLogger("pathhelper.config")


class ConfigError(Exception):
    """Raised when the configuration file cannot be parsed."""


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Environment variable inspected when --variable is not given
    variable: str = DEFAULT_VARIABLE

    # Log file path; "default" selects the XDG state location
    log_file: Path | None = _path_field()

    # Count only executable files in `count`
    count_executables_only: bool = False

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                if value.strip() == "":
                    setattr(self, f.name, None)
                elif value.strip() == "default":
                    setattr(self, f.name, default_log_file())
                else:
                    setattr(self, f.name, Path(value).expanduser())

        if not self.variable.strip():
            self.variable = DEFAULT_VARIABLE

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Config":
        """Build a configuration from parsed TOML, ignoring unknown keys."""

        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                logger.warning("Ignoring unknown configuration key: %s", key)
                continue
            values[key] = value

        if not isinstance(values.get("variable", DEFAULT_VARIABLE), str):
            raise ConfigError("'variable' must be a string")
        if not isinstance(values.get("count_executables_only", False), bool):
            raise ConfigError("'count_executables_only' must be a boolean")
        if not isinstance(values.get("log_file", ""), str):
            raise ConfigError("'log_file' must be a string")
        return cls(**values)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults. The result is cached for the
        lifetime of the process.

        Args:
            config_file: Explicit file to read instead of the default location.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigError: If the file exists but is not valid TOML.
        """
        if cls._instance is not None:
            return cls._instance

        target = config_file or default_config_path()

        if target.exists():
            try:
                with open(target, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                raise ConfigError(f"Failed to load configuration from {target}: {e}") from e
            instance = cls.from_mapping(config_dict)
            logger.debug("Configuration loaded from %s", target)
        else:
            instance = cls()

        cls._instance = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached instance so the next ``load`` reads the file again."""

        cls._instance = None


__all__ = ["Config", "ConfigError", "DEFAULT_VARIABLE"]
