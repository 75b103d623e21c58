"""Literal search predicates: prefix, suffix, substring and positional lookup.

Matching is always literal. Case-insensitive variants fold both operands
with str.lower() before comparing.
"""

from __future__ import annotations

from typing import Any

from string_extensions.core.validation import (
    require_index,
    require_string,
    resolve_case_sensitive,
)


def _prepare(s: Any, pattern: Any, case_sensitive: Any) -> tuple[str, str]:
    """Validate search arguments and apply the case fold if requested."""
    require_string(s, "s")
    require_string(pattern, "pattern")
    if resolve_case_sensitive(case_sensitive):
        return s, pattern
    return s.lower(), pattern.lower()


def starts_with(s: str, pattern: str, case_sensitive: bool | None = None) -> bool:
    """Check whether s begins with pattern.

    Args:
        s: String to search in.
        pattern: Prefix to look for. An empty pattern always matches.
        case_sensitive: None or True for an exact comparison, False to
            compare case-insensitively.

    Returns:
        True if s starts with pattern.

    Raises:
        InvalidArgumentError: If s or pattern is not a str, or
            case_sensitive is neither None nor a bool.

    Example:
        >>> starts_with("Hello", "he", False)
        True
    """
    text, prefix = _prepare(s, pattern, case_sensitive)
    return text.startswith(prefix)


def ends_with(s: str, pattern: str, case_sensitive: bool | None = None) -> bool:
    """Check whether s ends with pattern.

    Same argument rules as starts_with().
    """
    text, suffix = _prepare(s, pattern, case_sensitive)
    return text.endswith(suffix)


def contains(s: str, pattern: str, case_sensitive: bool | None = None) -> bool:
    """Check whether pattern occurs in s as a literal substring.

    Same argument rules as starts_with().
    """
    text, needle = _prepare(s, pattern, case_sensitive)
    return needle in text


def not_contains(s: str, pattern: str, case_sensitive: bool | None = None) -> bool:
    """Negation of contains()."""
    _prepare(s, pattern, case_sensitive)
    return not contains(s, pattern, case_sensitive)


def element_at(s: str, index: int) -> str | None:
    """Get the character at a one-based position.

    Negative indexes count from the end, so -1 is the last character.
    Index 0 is always out of range.

    Args:
        s: String to index.
        index: One-based position, or negative offset from the end.

    Returns:
        Single-character string, or None if the position is out of range.

    Raises:
        InvalidArgumentError: If s is not a str or index is not an int.
    """
    require_string(s, "s")
    require_index(index)

    if index < 0:
        index = len(s) + index + 1
    if index < 1 or index > len(s):
        return None
    return s[index - 1]
