"""CLI compile and test commands for Release Pattern Builder."""

import json
import logging
from pathlib import Path
from typing import Any, TextIO

import click

from release_pattern_builder.cli.exit_codes import ExitCode
from release_pattern_builder.conditions.compiler import compile_conditions
from release_pattern_builder.conditions.loader import (
    ConditionSetValidationError,
    load_condition_set,
)
from release_pattern_builder.conditions.matchers import (
    LineResult,
    PatternTester,
    validate_pattern,
)
from release_pattern_builder.conditions.models import (
    Advisory,
    Combinator,
    Compiled,
    CompileResult,
    Condition,
    Empty,
)
from release_pattern_builder.conditions.reporting import (
    PatternNotAppliableError,
    conflict_messages,
)

logger = logging.getLogger(__name__)

_COMBINATOR_OPTION = click.option(
    "--combinator",
    type=click.Choice(["AND", "OR"], case_sensitive=False),
    default=None,
    help="Override the document's combinator.",
)


def _load_conditions(
    ctx: click.Context, path: Path, combinator: str | None
) -> tuple[list[Condition], Combinator]:
    """Load a condition-set document, exiting with the matching code on error."""
    builder = ctx.obj["config"].builder

    if not path.exists():
        click.echo(f"Error: File not found: {path}", err=True)
        ctx.exit(ExitCode.TARGET_NOT_FOUND)

    try:
        conditions, document_combinator = load_condition_set(
            path,
            default_combinator=Combinator(builder.default_combinator),
            default_case_sensitive=builder.default_case_sensitive,
        )
    except ConditionSetValidationError as e:
        click.echo(f"Error: {e.message}", err=True)
        ctx.exit(ExitCode.VALIDATION_ERROR)

    if combinator is not None:
        document_combinator = Combinator(combinator.upper())
    return conditions, document_combinator


def _exit_code_for(result: CompileResult) -> ExitCode:
    if isinstance(result, Empty):
        return ExitCode.EMPTY_PATTERN
    if isinstance(result, Advisory):
        return ExitCode.ADVISORY_PATTERN
    return ExitCode.SUCCESS


def result_to_dict(result: CompileResult) -> dict[str, Any]:
    """Format a compile result for JSON output."""
    flat = result.as_compiled_pattern()
    return {
        "outcome": result.outcome,
        "pattern": flat.pattern,
        "positional_and_conflict": flat.positional_and_conflict,
        "mixed_case_sensitivity": flat.mixed_case_sensitivity,
        "messages": conflict_messages(result),
    }


def format_result_human(result: CompileResult) -> str:
    """Format a compile result for terminal output."""
    if isinstance(result, Empty):
        return "No valid conditions; nothing to compile."
    if isinstance(result, Advisory):
        lines = [
            "Cannot combine these conditions into one pattern.",
            f"  Advisory (not a regex): {result.pattern}",
        ]
        lines.extend(f"  - {message}" for message in conflict_messages(result))
        return "\n".join(lines)
    return result.pattern


@click.command("compile")
@click.argument("condition_file", type=click.Path(path_type=Path))
@_COMBINATOR_OPTION
@click.option("--json", "json_output", is_flag=True, help="Output as JSON.")
@click.pass_context
def compile_command(
    ctx: click.Context,
    condition_file: Path,
    combinator: str | None,
    json_output: bool,
) -> None:
    """Compile a condition-set document into a regex pattern.

    Exits 41 when an AND combination can only be shown as advisory text,
    40 when no condition is filled in, and 42 when the regex engine
    rejects the pattern (a malformed 'matches' value).
    """
    conditions, combinator_value = _load_conditions(ctx, condition_file, combinator)
    result = compile_conditions(conditions, combinator_value)
    logger.debug(
        "Compiled %d condition(s) with %s: %s",
        len(conditions),
        combinator_value.value,
        result.outcome,
    )

    error = None
    if isinstance(result, Compiled):
        error = validate_pattern(result.pattern)
    if error is not None:
        logger.debug("Regex engine rejected %r: %s", result.pattern, error)

    if json_output:
        payload = result_to_dict(result)
        if error is not None:
            payload["error"] = error
        click.echo(json.dumps(payload, indent=2))
    elif error is not None:
        click.echo(result.pattern)
        click.echo(f"Error: Invalid regex pattern: {error}", err=True)
    else:
        click.echo(format_result_human(result), err=isinstance(result, Empty))

    if error is not None:
        ctx.exit(ExitCode.INVALID_PATTERN)
    ctx.exit(_exit_code_for(result))


def format_line_result(line: LineResult) -> str:
    if line.matched:
        return f"MATCH     {line.text}  (matched: {line.match_text!r})"
    return f"NO MATCH  {line.text}"


@click.command("test")
@click.argument("condition_file", type=click.Path(path_type=Path))
@_COMBINATOR_OPTION
@click.option(
    "--text",
    "texts",
    multiple=True,
    help="Sample release name to test (repeatable).",
)
@click.option(
    "--input",
    "input_file",
    type=click.File("r"),
    default=None,
    help="File with one release name per line ('-' for stdin).",
)
@click.option("--json", "json_output", is_flag=True, help="Output as JSON.")
@click.pass_context
def test_command(
    ctx: click.Context,
    condition_file: Path,
    combinator: str | None,
    texts: tuple[str, ...],
    input_file: TextIO | None,
    json_output: bool,
) -> None:
    """Compile a condition-set document and test it against release names."""
    samples = list(texts)
    if input_file is not None:
        samples.extend(line.rstrip("\n") for line in input_file)
    if not samples:
        raise click.UsageError("Provide at least one --text or an --input file.")

    conditions, combinator_value = _load_conditions(ctx, condition_file, combinator)
    result = compile_conditions(conditions, combinator_value)

    try:
        tester = PatternTester.from_result(result)
    except PatternNotAppliableError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(_exit_code_for(result))
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(ExitCode.INVALID_PATTERN)

    results = tester.test_lines(samples)
    matched = sum(1 for line in results if line.matched)
    logger.debug("Tested %d sample(s): %d matched", len(results), matched)

    if json_output:
        payload = {
            "pattern": tester.pattern,
            "results": [
                {
                    "text": line.text,
                    "matched": line.matched,
                    "match_text": line.match_text,
                }
                for line in results
            ],
        }
        click.echo(json.dumps(payload, indent=2))
        return

    click.echo(f"Pattern: {tester.pattern}")
    for line in results:
        click.echo(format_line_result(line))
    click.echo(f"{matched}/{len(results)} matched")
