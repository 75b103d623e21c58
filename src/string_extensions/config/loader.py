"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (applied by the caller, see logging_factory)
2. Environment variables (STREXT_*)
3. Config file (~/.strext/config.toml)
4. Default values

Environment variables:
- STREXT_CONFIG_PATH: Path to config file (overrides default location)
- STREXT_LOG_LEVEL: Log level (debug, info, warning, error)
- STREXT_LOG_FILE: Path to log file
- STREXT_LOG_FORMAT: Log format (text, json)
- STREXT_LOG_INCLUDE_STDERR: Also log to stderr when a log file is set
- STREXT_LOG_MAX_BYTES: Log file rotation threshold in bytes
- STREXT_LOG_BACKUP_COUNT: Number of rotated log files to keep
- STREXT_OUTPUT_FORMAT: Default CLI output format (text, json)
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from string_extensions.config.env import EnvReader
from string_extensions.config.models import LoggingConfig, OutputConfig, StrextConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".strext"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

_config_cache: StrextConfig | None = None


def get_default_config_path(reader: EnvReader | None = None) -> Path:
    """Get the default config file path.

    Can be overridden by the STREXT_CONFIG_PATH environment variable.
    """
    reader = reader or EnvReader()
    return reader.get_path("STREXT_CONFIG_PATH", DEFAULT_CONFIG_FILE)


def load_config_file(
    path: Path | None = None, reader: EnvReader | None = None
) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        path: Path to config file. If None, uses default location.
        reader: Environment reader used to resolve the default location.

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist
        or cannot be parsed.
    """
    if path is None:
        path = get_default_config_path(reader)

    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        with path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to load config file %s: %s", path, e)
        return {}

    logger.debug("Loaded config from %s", path)
    return config


def _section(file_config: dict[str, Any], name: str) -> dict[str, Any]:
    section = file_config.get(name, {})
    if not isinstance(section, dict):
        logger.warning("Ignoring config section [%s]: not a table", name)
        return {}
    return section


def build_config(
    file_config: dict[str, Any], reader: EnvReader | None = None
) -> StrextConfig:
    """Merge file values, environment variables and defaults.

    Args:
        file_config: Parsed config file contents.
        reader: Environment reader. Defaults to reading os.environ.

    Returns:
        Merged configuration.

    Raises:
        ValueError: If a merged value fails model validation.
    """
    reader = reader or EnvReader()
    defaults = LoggingConfig()
    logging_file = _section(file_config, "logging")
    output_file = _section(file_config, "output")

    file_log_path = logging_file.get("file")
    if file_log_path is not None and not isinstance(file_log_path, str):
        raise ValueError(
            f"logging.file must be a string, got {type(file_log_path).__name__}"
        )

    # Values are passed through unconverted; LoggingConfig rejects wrong types
    log_config = LoggingConfig(
        level=reader.get_str(
            "STREXT_LOG_LEVEL", logging_file.get("level", defaults.level)
        ),
        file=reader.get_path(
            "STREXT_LOG_FILE",
            Path(file_log_path).expanduser() if file_log_path else None,
        ),
        format=reader.get_str(
            "STREXT_LOG_FORMAT", logging_file.get("format", defaults.format)
        ),
        include_stderr=reader.get_bool(
            "STREXT_LOG_INCLUDE_STDERR",
            logging_file.get("include_stderr", defaults.include_stderr),
        ),
        max_bytes=reader.get_int(
            "STREXT_LOG_MAX_BYTES", logging_file.get("max_bytes", defaults.max_bytes)
        ),
        backup_count=reader.get_int(
            "STREXT_LOG_BACKUP_COUNT",
            logging_file.get("backup_count", defaults.backup_count),
        ),
    )

    output_config = OutputConfig(
        format=reader.get_str(
            "STREXT_OUTPUT_FORMAT", output_file.get("format", OutputConfig().format)
        ),
    )

    return StrextConfig(logging=log_config, output=output_config)


def get_config(config_path: Path | None = None) -> StrextConfig:
    """Get configuration with full precedence handling.

    The result is cached for the process; call clear_config_cache() to
    force a reload.

    Args:
        config_path: Path to config file (overrides STREXT_CONFIG_PATH).

    Returns:
        StrextConfig with merged configuration.
    """
    global _config_cache
    if _config_cache is not None and config_path is None:
        return _config_cache

    config = build_config(load_config_file(config_path))
    if config_path is None:
        _config_cache = config
    return config


def clear_config_cache() -> None:
    """Clear the cached configuration."""
    global _config_cache
    _config_cache = None
