"""String transformations: replacement, trimming, splitting.

Every function returns a new value; inputs are never modified.
"""

from __future__ import annotations

from string_extensions.core.constants import WHITESPACE
from string_extensions.core.errors import InvalidArgumentError
from string_extensions.core.validation import require_string, resolve_case_sensitive


def _replace_folded(s: str, old_value: str, new_value: str) -> str:
    # Each window is len(old_value) characters of s, lowered as a unit.
    # Unmatched text keeps its casing and the cursor skips inserted text.
    target = old_value.lower()
    width = len(old_value)
    parts: list[str] = []
    cursor = 0
    pos = 0
    while pos + width <= len(s):
        if s[pos : pos + width].lower() == target:
            parts.append(s[cursor:pos])
            parts.append(new_value)
            pos += width
            cursor = pos
        else:
            pos += 1
    parts.append(s[cursor:])
    return "".join(parts)


def replace(
    s: str,
    old_value: str,
    new_value: str,
    case_sensitive: bool | None = None,
) -> str:
    """Replace every non-overlapping occurrence of old_value.

    Occurrences are found left to right. In case-insensitive mode only the
    matched span is substituted; the rest of s keeps its original case.
    Replacement text is never rescanned. An empty old_value leaves s
    unchanged.

    Case-insensitive matching compares windows of len(old_value)
    characters. A character whose lowercase form has a different length
    (such as U+0130, which lowers to two code points) only matches where
    old_value folds the same way, so contains() can report a match that
    replace() does not substitute.

    Args:
        s: Source string.
        old_value: Literal text to search for.
        new_value: Replacement text.
        case_sensitive: None or True for exact matching, False to match
            case-insensitively.

    Returns:
        New string with replacements applied.

    Raises:
        InvalidArgumentError: If any string argument is not a str, or
            case_sensitive is neither None nor a bool.

    Example:
        >>> replace("hello hello", "HELLO", "Hi", False)
        'Hi Hi'
    """
    require_string(s, "s")
    require_string(old_value, "old_value")
    require_string(new_value, "new_value")
    sensitive = resolve_case_sensitive(case_sensitive)

    if not old_value:
        return s
    if sensitive:
        return s.replace(old_value, new_value)
    return _replace_folded(s, old_value, new_value)


def trim(s: str) -> str:
    """Remove leading and trailing whitespace."""
    require_string(s, "s")
    return s.strip(WHITESPACE)


def trim_start(s: str) -> str:
    """Remove leading whitespace. All-whitespace input gives ""."""
    require_string(s, "s")
    return s.lstrip(WHITESPACE)


def trim_end(s: str) -> str:
    """Remove trailing whitespace. All-whitespace input gives ""."""
    require_string(s, "s")
    return s.rstrip(WHITESPACE)


def split(s: str, separator: str | None = None) -> list[str]:
    """Split s into the non-empty tokens between separator runs.

    Each character of separator is a delimiter on its own, so ",;" splits
    on commas and semicolons alike. Consecutive delimiters collapse and no
    empty tokens are produced.

    Args:
        s: String to split.
        separator: Delimiter characters. None splits on whitespace.

    Returns:
        Tokens in order of appearance.

    Raises:
        InvalidArgumentError: If s is not a str, or separator is neither
            None nor a non-empty str.
    """
    require_string(s, "s")
    if separator is None:
        delimiters = WHITESPACE
    else:
        delimiters = require_string(separator, "separator")
        if not delimiters:
            raise InvalidArgumentError("separator", "separator must not be empty")

    tokens: list[str] = []
    current: list[str] = []
    for ch in s:
        if ch in delimiters:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        tokens.append("".join(current))
    return tokens


def to_characters(s: str) -> list[str]:
    """Break s into a list of single-character strings."""
    require_string(s, "s")
    return list(s)
