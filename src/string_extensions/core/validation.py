"""Validation utilities.

This module provides pure functions for validating operation arguments.
Each helper returns normally for valid input and raises
InvalidArgumentError otherwise.
"""

from typing import Any

from string_extensions.core.errors import InvalidArgumentError


def _type_name(value: Any) -> str:
    return type(value).__name__


def require_string(value: Any, argument: str) -> str:
    """Ensure a required parameter is a string.

    Args:
        value: Value to validate.
        argument: Parameter name used in the error message.

    Returns:
        The value, unchanged.

    Raises:
        InvalidArgumentError: If value is not a str.
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(
            argument, f"{argument} must be str, got {_type_name(value)}"
        )
    return value


def resolve_case_sensitive(value: Any) -> bool:
    """Resolve an optional case-sensitivity flag.

    Args:
        value: None, True or False.

    Returns:
        True when comparisons should be case-sensitive.

    Raises:
        InvalidArgumentError: If value is neither None nor a bool.
    """
    if value is None:
        return True
    if not isinstance(value, bool):
        raise InvalidArgumentError(
            "case_sensitive",
            f"case_sensitive must be None or bool, got {_type_name(value)}",
        )
    return value


def require_index(value: Any) -> int:
    """Ensure an index parameter is an integer.

    bool is rejected even though it subclasses int.

    Raises:
        InvalidArgumentError: If value is not an int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            "index", f"index must be int, got {_type_name(value)}"
        )
    return value
