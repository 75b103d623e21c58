"""String predicates and transformations."""

from string_extensions.core.compare import (
    equals,
    is_empty,
    is_null_or_empty,
    is_null_or_white_space,
    is_white_space,
    not_equals,
)
from string_extensions.core.constants import EMPTY, SPACE, WHITESPACE
from string_extensions.core.errors import InvalidArgumentError
from string_extensions.core.search import (
    contains,
    element_at,
    ends_with,
    not_contains,
    starts_with,
)
from string_extensions.core.transform import (
    replace,
    split,
    to_characters,
    trim,
    trim_end,
    trim_start,
)

__all__ = [
    # Constants
    "EMPTY",
    "SPACE",
    "WHITESPACE",
    # Errors
    "InvalidArgumentError",
    # Search
    "contains",
    "element_at",
    "ends_with",
    "not_contains",
    "starts_with",
    # Comparison
    "equals",
    "is_empty",
    "is_null_or_empty",
    "is_null_or_white_space",
    "is_white_space",
    "not_equals",
    # Transforms
    "replace",
    "split",
    "to_characters",
    "trim",
    "trim_end",
    "trim_start",
]
