"""Operator registry for the condition builder.

Maps every Operator to the rule that turns a condition value into a regex
fragment. Fragment rules receive the value already escaped, except for
``matches`` whose value is user-authored regex.

Usage:
    from release_pattern_builder.conditions.operators import build_fragment

    build_fragment(Operator.STARTS_WITH, "The", case_sensitive=False)
    # '(?i)^The'
"""

from collections.abc import Callable
from dataclasses import dataclass

from release_pattern_builder.conditions.escaping import escape_literal
from release_pattern_builder.conditions.models import (
    CASE_AGNOSTIC_OPERATORS,
    VALUELESS_OPERATORS,
    Condition,
    Operator,
)

CASE_INSENSITIVE_FLAG = "(?i)"


@dataclass(frozen=True)
class OperatorSpec:
    """Menu label and fragment rule for one operator."""

    operator: Operator
    label: str
    # Builds the case-sensitive fragment from an already prepared literal
    body: Callable[[str], str]

    @property
    def requires_value(self) -> bool:
        return self.operator not in VALUELESS_OPERATORS

    @property
    def honours_case(self) -> bool:
        return self.operator not in CASE_AGNOSTIC_OPERATORS

    def fragment(self, literal: str, case_sensitive: bool) -> str:
        """Apply the rule, prepending ``(?i)`` when matching ignores case."""
        body = self.body(literal)
        if self.honours_case and not case_sensitive:
            return CASE_INSENSITIVE_FLAG + body
        return body


def _spec(operator: Operator, label: str, body: Callable[[str], str]):
    return operator, OperatorSpec(operator, label, body)


OPERATORS: dict[Operator, OperatorSpec] = dict(
    [
        _spec(Operator.CONTAINS, "Contains", lambda v: v),
        _spec(Operator.NOT_CONTAINS, "Does Not Contain", lambda v: f"^(?!.*{v}).*$"),
        _spec(Operator.STARTS_WITH, "Starts With", lambda v: f"^{v}"),
        _spec(Operator.ENDS_WITH, "Ends With", lambda v: f"{v}$"),
        _spec(Operator.EQUALS, "Equals (Exact)", lambda v: f"^{v}$"),
        _spec(Operator.MATCHES, "Matches Pattern (Regex)", lambda v: v),
        _spec(Operator.WORD_BOUNDARY, "Word (Standalone)", lambda v: rf"\b{v}\b"),
        _spec(Operator.IS_EMPTY, "Is Empty", lambda v: "^$"),
        _spec(Operator.IS_NOT_EMPTY, "Is Not Empty", lambda v: ".+"),
    ]
)

_missing = set(Operator) - set(OPERATORS)
if _missing:
    raise RuntimeError(
        f"Operator registry is missing: {sorted(op.value for op in _missing)}"
    )


def get_operator_spec(operator: Operator) -> OperatorSpec:
    """Look up the registry entry for an operator."""
    return OPERATORS[operator]


def operator_label(operator: Operator) -> str:
    """Human-readable menu label, e.g. ``Starts With``."""
    return OPERATORS[operator].label


def build_fragment(operator: Operator, value: str, case_sensitive: bool) -> str:
    """Build the regex fragment for an operator and a raw user value.

    The value is escaped first unless the operator is ``matches``.

    Args:
        operator: Operator to apply.
        value: Value as entered by the user.
        case_sensitive: False prepends the inline ``(?i)`` flag for
            operators that honour it.

    Returns:
        The regex fragment.
    """
    literal = value if operator is Operator.MATCHES else escape_literal(value)
    return OPERATORS[operator].fragment(literal, case_sensitive)


def condition_fragment(condition: Condition) -> str:
    """Build the regex fragment for a single condition."""
    return build_fragment(
        condition.operator, condition.value, condition.case_sensitive
    )
