"""Search commands: starts-with, ends-with, contains, not-contains, element-at."""

import click

from string_extensions.cli.exit_codes import ExitCode
from string_extensions.cli.output import (
    case_flag,
    emit,
    error_exit,
    ignore_case_option,
    json_option,
    resolve_format,
    run_operation,
)
from string_extensions.core.search import (
    contains,
    element_at,
    ends_with,
    not_contains,
    starts_with,
)


@click.command("starts-with")
@click.argument("s")
@click.argument("pattern")
@ignore_case_option
@json_option
@click.pass_context
def starts_with_command(
    ctx: click.Context, s: str, pattern: str, ignore_case: bool, as_json: bool
) -> None:
    """Check whether S begins with PATTERN."""
    result = run_operation(
        ctx, starts_with, s, pattern, case_flag(ignore_case), as_json=as_json
    )
    emit(ctx, result, as_json)


@click.command("ends-with")
@click.argument("s")
@click.argument("pattern")
@ignore_case_option
@json_option
@click.pass_context
def ends_with_command(
    ctx: click.Context, s: str, pattern: str, ignore_case: bool, as_json: bool
) -> None:
    """Check whether S ends with PATTERN."""
    result = run_operation(
        ctx, ends_with, s, pattern, case_flag(ignore_case), as_json=as_json
    )
    emit(ctx, result, as_json)


@click.command("contains")
@click.argument("s")
@click.argument("pattern")
@ignore_case_option
@json_option
@click.pass_context
def contains_command(
    ctx: click.Context, s: str, pattern: str, ignore_case: bool, as_json: bool
) -> None:
    """Check whether PATTERN occurs literally in S."""
    result = run_operation(
        ctx, contains, s, pattern, case_flag(ignore_case), as_json=as_json
    )
    emit(ctx, result, as_json)


@click.command("not-contains")
@click.argument("s")
@click.argument("pattern")
@ignore_case_option
@json_option
@click.pass_context
def not_contains_command(
    ctx: click.Context, s: str, pattern: str, ignore_case: bool, as_json: bool
) -> None:
    """Check whether PATTERN does not occur in S."""
    result = run_operation(
        ctx, not_contains, s, pattern, case_flag(ignore_case), as_json=as_json
    )
    emit(ctx, result, as_json)


# ignore_unknown_options lets negative indexes like -1 through as arguments
@click.command("element-at", context_settings={"ignore_unknown_options": True})
@click.argument("s")
@click.argument("index", type=int)
@json_option
@click.pass_context
def element_at_command(ctx: click.Context, s: str, index: int, as_json: bool) -> None:
    """Print the character of S at one-based INDEX.

    Negative indexes count from the end (-1 is the last character).
    Exits with NOT_FOUND when INDEX is out of range.
    """
    result = run_operation(ctx, element_at, s, index, as_json=as_json)
    emit(ctx, result, as_json)
    if result is None:
        error_exit(
            f"index {index} is out of range",
            ExitCode.NOT_FOUND,
            resolve_format(ctx, as_json) == "json",
        )
