"""Shared string constants."""

EMPTY = ""
SPACE = " "

# ASCII whitespace class used by trim, split and the whitespace predicates
WHITESPACE = " \t\n\r\v\f"
