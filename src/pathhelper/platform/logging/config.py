"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Build the stderr console handler and optional rotating file handler.
Why: Keep stdout free for computed values while diagnostics stay configurable.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final

from rich.console import Console

from .handlers import PathEventRichHandler

LOGGER_NAME: Final[str] = "pathhelper"
FILE_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
MAX_LOG_BYTES: Final[int] = 10 * 1024 * 1024
LOG_BACKUPS: Final[int] = 5


def _console_handler(level: int) -> logging.Handler:
    handler = PathEventRichHandler(console=Console(stderr=True, soft_wrap=True))
    handler.setLevel(level)
    return handler


def _file_handler(log_file: Path, level: int) -> logging.Handler:
    target = Path(log_file).expanduser().resolve()
    target.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        target,
        maxBytes=MAX_LOG_BYTES,
        backupCount=LOG_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """(Re)configure the ``pathhelper`` logger.

    Calling it again replaces the previous handlers, so the CLI can raise or
    lower verbosity after the configuration file has been read.

    Args:
        log_file: Optional rotating log file; console-only when ``None``.
        console_level: Threshold for records shown on stderr.
        file_level: Threshold for records written to ``log_file``.

    Returns:
        logging.Logger: The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    logger.addHandler(_console_handler(console_level))
    if log_file is not None:
        logger.addHandler(_file_handler(log_file, file_level))

    return logger


logger: Final[logging.Logger] = setup_logger()


__all__ = ["LOGGER_NAME", "logger", "setup_logger"]
