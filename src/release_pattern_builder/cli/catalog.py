"""CLI commands listing the operators and fields of the condition builder."""

import click

from release_pattern_builder.cli.exit_codes import ExitCode
from release_pattern_builder.conditions.fields import (
    FIELDS,
    field_presets,
    get_field,
)
from release_pattern_builder.conditions.models import Operator
from release_pattern_builder.conditions.operators import get_operator_spec


@click.command("operators")
def operators_command() -> None:
    """List the available condition operators."""
    for operator in Operator:
        spec = get_operator_spec(operator)
        value_note = "value required" if spec.requires_value else "no value"
        click.echo(f"{operator.value:<14} {spec.label:<26} {value_note}")


@click.command("fields")
@click.argument("field_key", required=False)
@click.pass_context
def fields_command(ctx: click.Context, field_key: str | None) -> None:
    """List release fields, or the preset values of FIELD_KEY."""
    if field_key is None:
        for info in FIELDS:
            click.echo(f"{info.key:<14} {info.label:<15} {info.description}")
        return

    info = get_field(field_key)
    if info is None:
        known = ", ".join(f.key for f in FIELDS)
        click.echo(f"Error: Unknown field '{field_key}'. Known fields: {known}", err=True)
        ctx.exit(ExitCode.VALIDATION_ERROR)

    click.echo(f"{info.label}: {info.description}")
    presets = field_presets(field_key)
    if not presets:
        click.echo("  (no presets)")
    for preset in presets:
        click.echo(f"  {preset}")
