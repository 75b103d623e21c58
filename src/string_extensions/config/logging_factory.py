"""Apply strext's logging CLI flags on top of the loaded configuration."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from string_extensions.config.models import LoggingConfig


def build_logging_config(
    base: LoggingConfig,
    *,
    level: str | None = None,
    file: Path | None = None,
    json_format: bool = False,
) -> LoggingConfig:
    """Return a copy of base with the given CLI flags applied.

    Flags left at None (or json_format=False) keep the base value. The
    copy is validated again by LoggingConfig.__post_init__.
    """
    overrides: dict[str, object] = {}
    if level is not None:
        overrides["level"] = level
    if file is not None:
        overrides["file"] = file
    if json_format:
        overrides["format"] = "json"
    return replace(base, **overrides)


def configure_logging_from_cli(
    base: LoggingConfig,
    *,
    level: str | None = None,
    file: Path | None = None,
    json_format: bool = False,
) -> logging.Logger:
    """Merge the --log-* flags into base and configure the package logger."""
    from string_extensions.logging import configure_logging

    return configure_logging(
        build_logging_config(base, level=level, file=file, json_format=json_format)
    )
