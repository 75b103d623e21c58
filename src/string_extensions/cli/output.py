"""Shared options and result rendering for strext commands."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

import click

from string_extensions.cli.exit_codes import ExitCode
from string_extensions.core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])
T = TypeVar("T")


def json_option(f: F) -> F:
    """Add a --json flag that forces JSON output."""
    return click.option(
        "--json",
        "as_json",
        is_flag=True,
        default=False,
        help="Emit the result as JSON.",
    )(f)


def ignore_case_option(f: F) -> F:
    """Add an -i/--ignore-case flag."""
    return click.option(
        "-i",
        "--ignore-case",
        is_flag=True,
        default=False,
        help="Compare case-insensitively.",
    )(f)


def case_flag(ignore_case: bool) -> bool | None:
    """Translate --ignore-case into a case_sensitive argument."""
    return False if ignore_case else None


def resolve_format(ctx: click.Context, as_json: bool) -> str:
    """Pick the output format: --json wins over the configured default."""
    if as_json:
        return "json"
    return (ctx.obj or {}).get("output_format", "text")


def format_result(value: Any, fmt: str) -> str:
    """Render an operation result for display.

    Text output prints booleans as true/false, lists one item per line and
    None as an empty string. JSON output is a single JSON document.
    """
    if fmt == "json":
        return json.dumps(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, list):
        return "\n".join(value)
    return str(value)


def emit(ctx: click.Context, value: Any, as_json: bool) -> None:
    """Write an operation result to stdout."""
    fmt = resolve_format(ctx, as_json)
    if fmt == "text" and (value is None or value == []):
        return
    click.echo(format_result(value, fmt))


def error_exit(
    message: str,
    code: ExitCode | int,
    json_output: bool = False,
) -> NoReturn:
    """Exit with a formatted error message on stderr.

    Args:
        message: Error message to display.
        code: Exit code to use (ExitCode enum or int).
        json_output: Whether to format the error as JSON.
    """
    if isinstance(code, ExitCode):
        code_name = code.name
        exit_value = int(code)
    else:
        code_name = "UNKNOWN_ERROR"
        exit_value = code

    if json_output:
        click.echo(
            json.dumps(
                {
                    "status": "failed",
                    "error": {"code": code_name, "message": message},
                }
            ),
            err=True,
        )
    else:
        click.echo(f"Error: {message}", err=True)

    sys.exit(exit_value)


def run_operation(
    ctx: click.Context,
    operation: Callable[..., T],
    *args: Any,
    as_json: bool = False,
) -> T:
    """Call a string operation, mapping invalid arguments to an exit code."""
    name = operation.__name__
    logger.debug(
        "Running %s with %d argument(s)", name, len(args), extra={"operation": name}
    )
    try:
        return operation(*args)
    except InvalidArgumentError as e:
        logger.debug(
            "Rejected argument %s",
            e.argument,
            extra={"operation": name, "argument": e.argument},
        )
        error_exit(
            e.message,
            ExitCode.INVALID_ARGUMENT,
            resolve_format(ctx, as_json) == "json",
        )
