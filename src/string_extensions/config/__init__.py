"""Configuration management for string-extensions.

Configuration is resolved with the following precedence:
1. CLI flags (highest priority)
2. Environment variables (STREXT_*)
3. Config file (~/.strext/config.toml)
4. Default values (lowest priority)
"""

from string_extensions.config.env import EnvReader
from string_extensions.config.loader import (
    build_config,
    clear_config_cache,
    get_config,
    get_default_config_path,
    load_config_file,
)
from string_extensions.config.logging_factory import (
    build_logging_config,
    configure_logging_from_cli,
)
from string_extensions.config.models import (
    LoggingConfig,
    OutputConfig,
    StrextConfig,
)

__all__ = [
    # Models
    "LoggingConfig",
    "OutputConfig",
    "StrextConfig",
    # Loader
    "build_config",
    "clear_config_cache",
    "get_config",
    "get_default_config_path",
    "load_config_file",
    # Helpers
    "EnvReader",
    "build_logging_config",
    "configure_logging_from_cli",
]
