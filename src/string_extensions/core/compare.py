"""Equality and emptiness predicates."""

from __future__ import annotations

from typing import Any

from string_extensions.core.constants import WHITESPACE
from string_extensions.core.validation import require_string, resolve_case_sensitive


def _is_blank(s: str) -> bool:
    return all(ch in WHITESPACE for ch in s)


def equals(s: str, value: Any, case_sensitive: bool | None = None) -> bool:
    """Compare s with another value for textual equality.

    A value that is not a str never compares equal and does not raise.
    The case_sensitive flag is still validated first.

    Args:
        s: Reference string.
        value: Value to compare against.
        case_sensitive: None or True for an exact comparison, False to
            compare case-insensitively.

    Returns:
        True if value is a str equal to s under the chosen case rule.

    Raises:
        InvalidArgumentError: If s is not a str or case_sensitive is
            neither None nor a bool.
    """
    require_string(s, "s")
    sensitive = resolve_case_sensitive(case_sensitive)
    if not isinstance(value, str):
        return False
    if sensitive:
        return s == value
    return s.lower() == value.lower()


def not_equals(s: str, value: Any, case_sensitive: bool | None = None) -> bool:
    """Negation of equals()."""
    return not equals(s, value, case_sensitive)


def is_null_or_empty(value: Any) -> bool:
    """Check whether value is None or the empty string.

    Never raises; any other value, string or not, gives False.
    """
    return value is None or (isinstance(value, str) and len(value) == 0)


def is_null_or_white_space(value: Any) -> bool:
    """Check whether value is None or a string of only whitespace.

    The empty string counts as whitespace-only. Values that are neither
    None nor a str give False.
    """
    if value is None:
        return True
    if not isinstance(value, str):
        return False
    return _is_blank(value)


def is_empty(s: str) -> bool:
    """Check whether s has zero length."""
    require_string(s, "s")
    return len(s) == 0


def is_white_space(s: str) -> bool:
    """Check whether every character of s is whitespace.

    Whitespace is the ASCII class in WHITESPACE. The empty string
    counts as whitespace-only.
    """
    require_string(s, "s")
    return _is_blank(s)
