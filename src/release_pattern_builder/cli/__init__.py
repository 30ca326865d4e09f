"""CLI module for Release Pattern Builder."""

import logging
from pathlib import Path

import click

from release_pattern_builder.cli.exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="release-pattern-builder")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Config file (default: $RPB_CONFIG_PATH or ~/.rpb/config.toml).",
)
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
    config_path: Path | None,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Release Pattern Builder - turn match conditions into one regex."""
    from release_pattern_builder.config import (
        configure_logging_from_cli,
        get_config,
    )

    ctx.ensure_object(dict)

    try:
        config = get_config(config_path=config_path)
        configure_logging_from_cli(
            config.logging,
            level=log_level,
            file=log_file,
            format="json" if log_json else None,
        )
    except ValueError as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        ctx.exit(ExitCode.CONFIG_ERROR)

    logger.debug(
        "Builder defaults: combinator=%s, case_sensitive=%s",
        config.builder.default_combinator,
        config.builder.default_case_sensitive,
    )
    ctx.obj["config"] = config


# Defer import to avoid circular dependency
def _register_commands():
    from release_pattern_builder.cli.catalog import fields_command, operators_command
    from release_pattern_builder.cli.compile import compile_command, test_command

    main.add_command(compile_command)
    main.add_command(test_command)
    main.add_command(operators_command)
    main.add_command(fields_command)


_register_commands()
