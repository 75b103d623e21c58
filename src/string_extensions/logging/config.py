"""Logging setup for the strext command.

Handlers are attached to the ``string_extensions`` package logger rather
than the root logger, so applications that import the library keep their
own logging configuration.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

from string_extensions.logging.handlers import JSONFormatter

if TYPE_CHECKING:
    from string_extensions.config.models import LoggingConfig

PACKAGE_LOGGER = "string_extensions"

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _make_formatter(config: LoggingConfig) -> logging.Formatter:
    if config.format.lower() == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S%z")


def _open_file_handler(config: LoggingConfig) -> logging.Handler | None:
    """Open the rotating log file, or return None if it is unusable."""
    if config.file is None:
        return None
    path = config.file.expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"Warning: Could not open log file {path}: {e}\n")
        return None


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Replace the package logger's handlers according to config.

    Output goes to the log file when one is configured and usable, and to
    stderr when no file is in use or include_stderr is set.

    Args:
        config: Logging configuration.

    Returns:
        The configured package logger.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(config.level.upper())
    package_logger.handlers.clear()

    handlers: list[logging.Handler] = []
    file_handler = _open_file_handler(config)
    if file_handler is not None:
        handlers.append(file_handler)
    if config.include_stderr or file_handler is None:
        handlers.append(logging.StreamHandler(sys.stderr))

    formatter = _make_formatter(config)
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    return package_logger
