"""Shared test fixtures for string-extensions."""

import logging
from pathlib import Path

import pytest

from string_extensions.config.loader import clear_config_cache


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Point config loading at a private location and reset the cache."""
    for var in (
        "STREXT_LOG_LEVEL",
        "STREXT_LOG_FILE",
        "STREXT_LOG_FORMAT",
        "STREXT_LOG_INCLUDE_STDERR",
        "STREXT_LOG_MAX_BYTES",
        "STREXT_LOG_BACKUP_COUNT",
        "STREXT_OUTPUT_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("STREXT_CONFIG_PATH", str(tmp_path / "config.toml"))
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def reset_package_logger():
    """Save and restore the string_extensions logger between tests."""
    package_logger = logging.getLogger("string_extensions")
    original_handlers = package_logger.handlers[:]
    original_level = package_logger.level
    yield
    package_logger.handlers[:] = original_handlers
    package_logger.setLevel(original_level)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Return the config file path the autouse fixture points at."""
    return tmp_path / "config.toml"
