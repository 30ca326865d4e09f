"""Condition-to-regex compiler.

Turns the ordered condition list from the visual builder into a single
regular expression, or into advisory text when an AND combination cannot
be expressed as one pattern.

Key Functions:
    compile_conditions: Main entry point, returns Empty | Compiled | Advisory
    compile_pattern: Same computation, returned as a flat CompiledPattern

Usage:
    from release_pattern_builder.conditions.compiler import compile_conditions
    from release_pattern_builder.conditions.models import (
        Combinator,
        Condition,
        Operator,
    )

    result = compile_conditions(
        [
            Condition(id="1", operator=Operator.STARTS_WITH, value="The"),
            Condition(id="2", operator=Operator.ENDS_WITH, value="Remastered"),
        ],
        Combinator.AND,
    )
    # Compiled(pattern='(?i)^The.*Remastered$')

Compilation is a pure function of its inputs. It keeps no state, does
no I/O, and never raises for well-formed conditions.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from release_pattern_builder.conditions.escaping import escape_literal
from release_pattern_builder.conditions.models import (
    ANCHOR_COMPOSABLE_OPERATORS,
    ANCHORING_OPERATORS,
    POSITIONAL_OPERATORS,
    Advisory,
    AdvisoryReasons,
    Combinator,
    Compiled,
    CompiledPattern,
    CompileResult,
    Condition,
    Empty,
    Operator,
)
from release_pattern_builder.conditions.operators import (
    CASE_INSENSITIVE_FLAG,
    condition_fragment,
    operator_label,
)

# Joins fragments of an AND that cannot be composed. Display only.
ADVISORY_SEPARATOR = " && "

MIXED_CASE_MESSAGE = (
    "Case sensitivity must be uniform for AND; make every condition either "
    "case-sensitive or case-insensitive"
)


def compile_conditions(
    conditions: Iterable[Condition],
    combinator: Combinator | str = Combinator.AND,
) -> CompileResult:
    """Compile conditions into a regex pattern.

    Args:
        conditions: Conditions in display order. Conditions without a
            value (other than isEmpty/isNotEmpty) are skipped.
        combinator: AND or OR, as the enum or its name in any case.
            Irrelevant when only one condition is valid.

    Returns:
        Empty when no condition is valid, Compiled with an executable
        pattern, or Advisory when an AND cannot be expressed as one pattern.
    """
    if not isinstance(combinator, Combinator):
        combinator = Combinator(combinator.upper())
    valid = [condition for condition in conditions if condition.is_valid]

    if not valid:
        return Empty()

    fragments = [condition_fragment(condition) for condition in valid]

    if len(fragments) == 1:
        return Compiled(fragments[0])

    if combinator is Combinator.OR:
        return Compiled(combine_or(fragments))

    return combine_and(valid, fragments)


def compile_pattern(
    conditions: Iterable[Condition],
    combinator: Combinator | str = Combinator.AND,
) -> CompiledPattern:
    """Compile conditions and return the flat pattern/flags record."""
    return compile_conditions(conditions, combinator).as_compiled_pattern()


def combine_or(fragments: Sequence[str]) -> str:
    """Join fragments with alternation.

    Each branch keeps its own anchors, so alternation is always safe.
    """
    return "|".join(fragments)


def combine_and(
    conditions: Sequence[Condition], fragments: Sequence[str]
) -> CompileResult:
    """Combine two or more valid conditions with AND.

    Args:
        conditions: The valid conditions, in order.
        fragments: Their fragments, index-aligned with ``conditions``.

    Returns:
        Compiled via anchor composition when a positional operator is
        present, Compiled via lookaheads otherwise, or Advisory when the
        combination is not expressible.
    """
    operators = [condition.operator for condition in conditions]
    messages = positional_conflicts(operators)
    mixed_case = has_mixed_case_sensitivity(conditions)

    if messages or mixed_case:
        reasons = AdvisoryReasons(
            positional=bool(messages),
            mixed_case=mixed_case,
            messages=tuple(messages + ([MIXED_CASE_MESSAGE] if mixed_case else [])),
        )
        return Advisory(ADVISORY_SEPARATOR.join(fragments), reasons)

    if any(op in POSITIONAL_OPERATORS for op in operators):
        return Compiled(_compose_anchored(conditions))

    return Compiled(_compose_lookaheads(fragments))


def positional_conflicts(operators: Sequence[Operator]) -> list[str]:
    """List the reasons an AND of these operators cannot be one pattern.

    Args:
        operators: Operators of the valid conditions being ANDed.

    Returns:
        One message per problem found; empty when composition is possible.
    """
    counts = Counter(operators)
    messages: list[str] = []

    for op in (Operator.STARTS_WITH, Operator.ENDS_WITH, Operator.EQUALS):
        if counts[op] > 1:
            messages.append(
                f"Only one '{operator_label(op)}' condition can be combined with AND"
            )

    if counts[Operator.EQUALS] and any(
        counts[op]
        for op in (Operator.STARTS_WITH, Operator.ENDS_WITH, Operator.CONTAINS)
    ):
        messages.append(
            f"'{operator_label(Operator.EQUALS)}' cannot be combined with "
            "other conditions using AND"
        )

    has_positional = any(counts[op] for op in POSITIONAL_OPERATORS)
    # Counter keeps first-seen order, so messages follow the condition list
    for op in counts:
        if op in ANCHORING_OPERATORS:
            messages.append(
                f"'{operator_label(op)}' anchors the whole value and cannot "
                "be combined using AND"
            )
        elif has_positional and op not in ANCHOR_COMPOSABLE_OPERATORS:
            messages.append(
                f"'{operator_label(op)}' cannot be combined with positional "
                "conditions using AND"
            )

    return messages


def has_mixed_case_sensitivity(conditions: Iterable[Condition]) -> bool:
    """Check whether case-aware conditions disagree on case sensitivity.

    Operators that ignore the flag (matches, isEmpty, isNotEmpty) are
    not counted.
    """
    flags = {c.case_sensitive for c in conditions if c.honours_case}
    return len(flags) > 1


def _compose_anchored(conditions: Sequence[Condition]) -> str:
    """Merge startsWith/contains/endsWith into one ``^...$`` expression.

    Requires at most one startsWith and one endsWith, uniform case
    sensitivity, and nothing but startsWith/endsWith/contains.
    """
    start = ""
    end: str | None = None
    middle: list[str] = []
    for condition in conditions:
        literal = escape_literal(condition.value)
        if condition.operator is Operator.STARTS_WITH:
            start = literal
        elif condition.operator is Operator.ENDS_WITH:
            end = literal
        else:
            middle.append(".*" + literal)

    flag = "" if conditions[0].case_sensitive else CASE_INSENSITIVE_FLAG
    tail = f".*{end}$" if end is not None else ".*$"
    return f"{flag}^{start}{''.join(middle)}{tail}"


def _compose_lookaheads(fragments: Sequence[str]) -> str:
    """Express an unordered conjunction with one lookahead per fragment."""
    return "".join(f"(?=.*{fragment})" for fragment in fragments) + ".*"
