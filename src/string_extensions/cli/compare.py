"""Comparison and emptiness commands."""

import click

from string_extensions.cli.output import (
    case_flag,
    emit,
    ignore_case_option,
    json_option,
    run_operation,
)
from string_extensions.core.compare import (
    equals,
    is_empty,
    is_null_or_empty,
    is_null_or_white_space,
    is_white_space,
    not_equals,
)


@click.command("equals")
@click.argument("s")
@click.argument("value")
@ignore_case_option
@json_option
@click.pass_context
def equals_command(
    ctx: click.Context, s: str, value: str, ignore_case: bool, as_json: bool
) -> None:
    """Check whether S and VALUE are equal."""
    result = run_operation(
        ctx, equals, s, value, case_flag(ignore_case), as_json=as_json
    )
    emit(ctx, result, as_json)


@click.command("not-equals")
@click.argument("s")
@click.argument("value")
@ignore_case_option
@json_option
@click.pass_context
def not_equals_command(
    ctx: click.Context, s: str, value: str, ignore_case: bool, as_json: bool
) -> None:
    """Check whether S and VALUE differ."""
    result = run_operation(
        ctx, not_equals, s, value, case_flag(ignore_case), as_json=as_json
    )
    emit(ctx, result, as_json)


@click.command("is-empty")
@click.argument("s")
@json_option
@click.pass_context
def is_empty_command(ctx: click.Context, s: str, as_json: bool) -> None:
    """Check whether S has zero length."""
    emit(ctx, run_operation(ctx, is_empty, s, as_json=as_json), as_json)


@click.command("is-white-space")
@click.argument("s")
@json_option
@click.pass_context
def is_white_space_command(ctx: click.Context, s: str, as_json: bool) -> None:
    """Check whether S contains only whitespace."""
    emit(ctx, run_operation(ctx, is_white_space, s, as_json=as_json), as_json)


@click.command("is-null-or-empty")
@click.argument("s", required=False)
@json_option
@click.pass_context
def is_null_or_empty_command(ctx: click.Context, s: str | None, as_json: bool) -> None:
    """Check whether S is omitted or empty."""
    emit(ctx, is_null_or_empty(s), as_json)


@click.command("is-null-or-white-space")
@click.argument("s", required=False)
@json_option
@click.pass_context
def is_null_or_white_space_command(
    ctx: click.Context, s: str | None, as_json: bool
) -> None:
    """Check whether S is omitted or contains only whitespace."""
    emit(ctx, is_null_or_white_space(s), as_json)
