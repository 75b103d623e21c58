"""CLI module for string-extensions."""

import logging
from pathlib import Path

import click

from string_extensions.cli.exit_codes import ExitCode
from string_extensions.cli.output import error_exit

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="string-extensions")
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    default=None,
    help="Override log level (default: info).",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Override log file path.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Use JSON log format.",
)
@click.pass_context
def main(
    ctx: click.Context,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """strext - string predicates and transforms from the shell."""
    from string_extensions.config import get_config
    from string_extensions.config.logging_factory import configure_logging_from_cli

    ctx.ensure_object(dict)

    try:
        config = get_config()
        configure_logging_from_cli(
            config.logging, level=log_level, file=log_file, json_format=log_json
        )
    except ValueError as e:
        error_exit(f"invalid configuration: {e}", ExitCode.CONFIG_ERROR)

    ctx.obj["output_format"] = config.output.format.lower()
    logger.debug(
        "strext starting with output_format=%s",
        ctx.obj["output_format"],
        extra={"command": ctx.invoked_subcommand},
    )


# Defer import to avoid circular dependency
def _register_commands():
    from string_extensions.cli.compare import (
        equals_command,
        is_empty_command,
        is_null_or_empty_command,
        is_null_or_white_space_command,
        is_white_space_command,
        not_equals_command,
    )
    from string_extensions.cli.search import (
        contains_command,
        element_at_command,
        ends_with_command,
        not_contains_command,
        starts_with_command,
    )
    from string_extensions.cli.transform import (
        chars_command,
        replace_command,
        split_command,
        trim_command,
        trim_end_command,
        trim_start_command,
    )

    main.add_command(starts_with_command)
    main.add_command(ends_with_command)
    main.add_command(contains_command)
    main.add_command(not_contains_command)
    main.add_command(element_at_command)
    main.add_command(equals_command)
    main.add_command(not_equals_command)
    main.add_command(is_empty_command)
    main.add_command(is_white_space_command)
    main.add_command(is_null_or_empty_command)
    main.add_command(is_null_or_white_space_command)
    main.add_command(replace_command)
    main.add_command(trim_command)
    main.add_command(trim_start_command)
    main.add_command(trim_end_command)
    main.add_command(split_command)
    main.add_command(chars_command)


_register_commands()
