"""Transform commands: replace, trim, split, chars."""

import click

from string_extensions.cli.output import (
    case_flag,
    emit,
    ignore_case_option,
    json_option,
    run_operation,
)
from string_extensions.core.transform import (
    replace,
    split,
    to_characters,
    trim,
    trim_end,
    trim_start,
)


@click.command("replace")
@click.argument("s")
@click.argument("old_value", metavar="OLD")
@click.argument("new_value", metavar="NEW")
@ignore_case_option
@json_option
@click.pass_context
def replace_command(
    ctx: click.Context,
    s: str,
    old_value: str,
    new_value: str,
    ignore_case: bool,
    as_json: bool,
) -> None:
    """Replace every occurrence of OLD in S with NEW."""
    result = run_operation(
        ctx,
        replace,
        s,
        old_value,
        new_value,
        case_flag(ignore_case),
        as_json=as_json,
    )
    emit(ctx, result, as_json)


@click.command("trim")
@click.argument("s")
@json_option
@click.pass_context
def trim_command(ctx: click.Context, s: str, as_json: bool) -> None:
    """Remove leading and trailing whitespace from S."""
    emit(ctx, run_operation(ctx, trim, s, as_json=as_json), as_json)


@click.command("trim-start")
@click.argument("s")
@json_option
@click.pass_context
def trim_start_command(ctx: click.Context, s: str, as_json: bool) -> None:
    """Remove leading whitespace from S."""
    emit(ctx, run_operation(ctx, trim_start, s, as_json=as_json), as_json)


@click.command("trim-end")
@click.argument("s")
@json_option
@click.pass_context
def trim_end_command(ctx: click.Context, s: str, as_json: bool) -> None:
    """Remove trailing whitespace from S."""
    emit(ctx, run_operation(ctx, trim_end, s, as_json=as_json), as_json)


@click.command("split")
@click.argument("s")
@click.option(
    "-s",
    "--separator",
    default=None,
    help="Delimiter characters; each one splits on its own (default: whitespace).",
)
@json_option
@click.pass_context
def split_command(
    ctx: click.Context, s: str, separator: str | None, as_json: bool
) -> None:
    """Split S into non-empty tokens, one per line."""
    emit(ctx, run_operation(ctx, split, s, separator, as_json=as_json), as_json)


@click.command("chars")
@click.argument("s")
@json_option
@click.pass_context
def chars_command(ctx: click.Context, s: str, as_json: bool) -> None:
    """Print each character of S on its own line."""
    emit(ctx, run_operation(ctx, to_characters, s, as_json=as_json), as_json)
