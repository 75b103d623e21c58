"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success
    10-19: Validation errors (arguments, config)
    20-29: Lookup errors

Codes 1 and 2 are left to click (aborts and usage errors).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for strext commands."""

    # Success (0)
    SUCCESS = 0

    # Validation errors (10-19)
    INVALID_ARGUMENT = 10
    CONFIG_ERROR = 11

    # Lookup errors (20-29)
    NOT_FOUND = 20
