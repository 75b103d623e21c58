"""Logging setup for string-extensions.

Provides configurable logging with JSON format support and file rotation.
"""

from string_extensions.logging.config import configure_logging
from string_extensions.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "configure_logging",
]
