"""Configuration data models.

This module defines dataclasses for string-extensions configuration options.
Values usually come from a TOML file, so every field is type-checked in
__post_init__ and any mismatch is reported as ValueError.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

VALID_LOG_LEVELS = frozenset({"debug", "info", "warning", "error"})
VALID_LOG_FORMATS = frozenset({"text", "json"})
VALID_OUTPUT_FORMATS = frozenset({"text", "json"})


def _check_choice(name: str, value: Any, choices: frozenset[str]) -> None:
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string, got {type(value).__name__}")
    if value.lower() not in choices:
        raise ValueError(f"{name} must be one of {sorted(choices)}, got {value}")


def _check_count(name: str, value: Any) -> None:
    # bool is an int subclass but never a sensible size
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative")


@dataclass
class LoggingConfig:
    """Configuration for structured logging."""

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        _check_choice("level", self.level, VALID_LOG_LEVELS)
        _check_choice("format", self.format, VALID_LOG_FORMATS)
        if self.file is not None and not isinstance(self.file, Path):
            raise ValueError(
                f"file must be a path, got {type(self.file).__name__}"
            )
        if not isinstance(self.include_stderr, bool):
            raise ValueError(
                "include_stderr must be true or false, "
                f"got {self.include_stderr!r}"
            )
        _check_count("max_bytes", self.max_bytes)
        _check_count("backup_count", self.backup_count)


@dataclass
class OutputConfig:
    """Configuration for CLI result output."""

    format: str = "text"
    """Default result format for strext commands: text or json."""

    def __post_init__(self) -> None:
        """Validate configuration."""
        _check_choice("format", self.format, VALID_OUTPUT_FORMATS)


@dataclass
class StrextConfig:
    """Top-level configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
