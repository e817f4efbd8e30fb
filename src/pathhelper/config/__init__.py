"""Configuration package."""

from pathhelper.config.config import DEFAULT_VARIABLE, Config, ConfigError

__all__ = ["Config", "ConfigError", "DEFAULT_VARIABLE"]
