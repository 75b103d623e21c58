"""Fixtures for CLI integration tests."""

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def _restore_logging(reset_package_logger):
    """Every CLI invocation reconfigures the package logger."""
    yield


@pytest.fixture
def runner() -> CliRunner:
    """Return a click test runner."""
    return CliRunner()
