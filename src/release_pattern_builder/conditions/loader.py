"""Condition-set document loading and validation.

This module loads YAML (or JSON) condition-set documents used as input to
the command line and validates them using Pydantic models. Documents are
only read, never written.
"""

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

from release_pattern_builder.conditions.fields import is_known_field
from release_pattern_builder.conditions.models import (
    DEFAULT_FIELD,
    Combinator,
    Condition,
    Operator,
)

logger = logging.getLogger(__name__)

VALID_OPERATORS = tuple(op.value for op in Operator)


class ConditionSetValidationError(Exception):
    """Error during condition-set validation."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)


class ConditionModel(BaseModel):
    """Pydantic model for a single condition."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: str | None = None
    field: str = DEFAULT_FIELD
    operator: str
    value: str = ""
    case_sensitive: bool | None = Field(default=None, alias="caseSensitive")

    @field_validator("operator")
    @classmethod
    def validate_operator(cls, v: str) -> str:
        """Validate operator identifier."""
        if v not in VALID_OPERATORS:
            raise ValueError(
                f"Invalid operator '{v}'. Must be one of: {', '.join(VALID_OPERATORS)}"
            )
        return v

    @field_validator("value", mode="before")
    @classmethod
    def coerce_value(cls, v: Any) -> Any:
        """Accept bare YAML scalars such as 1080 or true as text."""
        if v is None:
            return ""
        if isinstance(v, bool):
            return str(v).lower()
        if isinstance(v, (int, float)):
            return str(v)
        return v


class ConditionSetModel(BaseModel):
    """Pydantic model for a condition-set document."""

    model_config = ConfigDict(extra="forbid")

    combinator: Literal["AND", "OR"] | None = None
    conditions: list[ConditionModel] = Field(default_factory=list)

    @field_validator("combinator", mode="before")
    @classmethod
    def normalize_combinator(cls, v: Any) -> Any:
        """Accept lowercase and/or."""
        if isinstance(v, str):
            return v.upper()
        return v


def _format_validation_error(error: ValidationError) -> tuple[str, str | None]:
    """Reduce a pydantic error to a message and the offending field path."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or None
    message = first["msg"]
    if location:
        message = f"{location}: {message}"
    return message, location


def load_condition_set_from_dict(
    data: dict[str, Any],
    *,
    default_combinator: Combinator = Combinator.AND,
    default_case_sensitive: bool = False,
) -> tuple[list[Condition], Combinator]:
    """Validate a parsed document and build the compiler inputs.

    Args:
        data: Parsed YAML/JSON document.
        default_combinator: Used when the document has no combinator.
        default_case_sensitive: Used for conditions without case_sensitive.

    Returns:
        Tuple of (conditions in document order, combinator).

    Raises:
        ConditionSetValidationError: If the document is invalid.
    """
    if not isinstance(data, dict):
        raise ConditionSetValidationError(
            "Condition set must be a mapping with a 'conditions' list"
        )

    try:
        model = ConditionSetModel.model_validate(data)
    except ValidationError as e:
        message, location = _format_validation_error(e)
        raise ConditionSetValidationError(message, field=location) from e

    conditions = []
    for index, item in enumerate(model.conditions):
        if not is_known_field(item.field):
            logger.warning(
                "Condition %d uses unknown field %r; it is kept for display only",
                index,
                item.field,
            )
        conditions.append(
            Condition(
                id=item.id or f"c{index}",
                operator=Operator(item.operator),
                value=item.value,
                case_sensitive=(
                    item.case_sensitive
                    if item.case_sensitive is not None
                    else default_case_sensitive
                ),
                field=item.field,
            )
        )

    combinator = (
        Combinator(model.combinator) if model.combinator else default_combinator
    )
    logger.debug(
        "Loaded %d condition(s) combined with %s", len(conditions), combinator.value
    )
    return conditions, combinator


def load_condition_set(
    path: Path,
    *,
    default_combinator: Combinator = Combinator.AND,
    default_case_sensitive: bool = False,
) -> tuple[list[Condition], Combinator]:
    """Load and validate a condition-set file.

    Args:
        path: Path to a YAML or JSON document.
        default_combinator: Used when the document has no combinator.
        default_case_sensitive: Used for conditions without case_sensitive.

    Returns:
        Tuple of (conditions, combinator).

    Raises:
        ConditionSetValidationError: If the file is unreadable or invalid.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConditionSetValidationError(f"File not found: {path}") from e
    except OSError as e:
        raise ConditionSetValidationError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConditionSetValidationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}

    return load_condition_set_from_dict(
        data,
        default_combinator=default_combinator,
        default_case_sensitive=default_case_sensitive,
    )
