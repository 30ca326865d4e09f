"""Shared test fixtures for Release Pattern Builder."""

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from release_pattern_builder.conditions.models import Condition, Operator


@pytest.fixture
def make_condition() -> Callable[..., Condition]:
    """Factory for conditions with sequential ids."""
    counter = iter(range(1_000_000))

    def _make(
        operator: Operator,
        value: str = "",
        case_sensitive: bool = False,
        field: str = "releaseTitle",
    ) -> Condition:
        return Condition(
            id=f"c{next(counter)}",
            operator=operator,
            value=value,
            case_sensitive=case_sensitive,
            field=field,
        )

    return _make


@pytest.fixture
def write_condition_set(tmp_path: Path) -> Callable[[str], Path]:
    """Write a condition-set YAML document and return its path."""

    def _write(content: str, name: str = "conditions.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def reset_root_logger():
    """Save and restore root logger state around a test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers[:] = original_handlers
    root.setLevel(original_level)
