"""Condition builder data models.

This module defines the inputs of the condition compiler (conditions and
the combinator joining them) and its tagged outcome types.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Operator(Enum):
    """Match operator applied to a condition value."""

    CONTAINS = "contains"
    NOT_CONTAINS = "notContains"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    EQUALS = "equals"
    MATCHES = "matches"  # Raw regex, passed through unescaped
    WORD_BOUNDARY = "wordBoundary"
    IS_EMPTY = "isEmpty"  # Value ignored
    IS_NOT_EMPTY = "isNotEmpty"  # Value ignored


class Combinator(Enum):
    """Logic joining multiple conditions into one expression."""

    AND = "AND"
    OR = "OR"


# Operators that pin the match to the start and/or end of the value
POSITIONAL_OPERATORS = frozenset(
    {Operator.STARTS_WITH, Operator.ENDS_WITH, Operator.EQUALS}
)

# Operators whose fragment anchors the whole value on its own
ANCHORING_OPERATORS = frozenset({Operator.NOT_CONTAINS, Operator.IS_EMPTY})

# Operators that can be merged into a single ^...$ expression
ANCHOR_COMPOSABLE_OPERATORS = POSITIONAL_OPERATORS | {Operator.CONTAINS}

# Operators that produce a fragment without needing a value
VALUELESS_OPERATORS = frozenset({Operator.IS_EMPTY, Operator.IS_NOT_EMPTY})

# Operators whose fragment ignores the case sensitivity flag
CASE_AGNOSTIC_OPERATORS = frozenset(
    {Operator.MATCHES, Operator.IS_EMPTY, Operator.IS_NOT_EMPTY}
)

DEFAULT_FIELD = "releaseTitle"


@dataclass(frozen=True)
class Condition:
    """A single field/operator/value tuple from the visual builder.

    The field is only carried for display; it never affects the
    generated pattern.
    """

    id: str
    operator: Operator
    value: str = ""
    case_sensitive: bool = False
    field: str = DEFAULT_FIELD

    @property
    def is_valid(self) -> bool:
        """Whether the condition takes part in compilation.

        A condition is valid when it has a non-blank value, or when its
        operator does not need one.
        """
        return bool(self.value.strip()) or self.operator in VALUELESS_OPERATORS

    @property
    def honours_case(self) -> bool:
        """Whether the case sensitivity flag changes this condition's fragment."""
        return self.operator not in CASE_AGNOSTIC_OPERATORS


@dataclass(frozen=True)
class CompiledPattern:
    """Flat view of a compilation outcome.

    When either conflict flag is set, ``pattern`` is advisory text for
    display and must not be used as a regular expression.
    """

    pattern: str | None = None
    positional_and_conflict: bool = False
    mixed_case_sensitivity: bool = False

    @property
    def has_conflict(self) -> bool:
        return self.positional_and_conflict or self.mixed_case_sensitivity


@dataclass(frozen=True)
class AdvisoryReasons:
    """Why an AND combination could not be expressed as one pattern."""

    positional: bool = False
    mixed_case: bool = False
    messages: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Empty:
    """No valid conditions; nothing to apply yet."""

    outcome = "empty"

    @property
    def pattern(self) -> None:
        return None

    @property
    def positional_and_conflict(self) -> bool:
        return False

    @property
    def mixed_case_sensitivity(self) -> bool:
        return False

    def as_compiled_pattern(self) -> CompiledPattern:
        return CompiledPattern()


@dataclass(frozen=True)
class Compiled:
    """An executable regular expression."""

    pattern: str

    outcome = "compiled"

    @property
    def positional_and_conflict(self) -> bool:
        return False

    @property
    def mixed_case_sensitivity(self) -> bool:
        return False

    def as_compiled_pattern(self) -> CompiledPattern:
        return CompiledPattern(pattern=self.pattern)


@dataclass(frozen=True)
class Advisory:
    """Non-executable ``" && "``-joined fragments shown for diagnostics."""

    pattern: str
    reasons: AdvisoryReasons

    outcome = "advisory"

    @property
    def positional_and_conflict(self) -> bool:
        return self.reasons.positional

    @property
    def mixed_case_sensitivity(self) -> bool:
        return self.reasons.mixed_case

    def as_compiled_pattern(self) -> CompiledPattern:
        return CompiledPattern(
            pattern=self.pattern,
            positional_and_conflict=self.reasons.positional,
            mixed_case_sensitivity=self.reasons.mixed_case,
        )


CompileResult = Union[Empty, Compiled, Advisory]
