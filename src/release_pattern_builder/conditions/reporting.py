"""Conflict reporting and the apply gate for compiled patterns.

Callers must only persist a pattern that compiled cleanly. Advisory text
(fragments joined with ``" && "``) is for display and is rejected here
rather than guessed into a regex.
"""

from release_pattern_builder.conditions.models import (
    Advisory,
    Compiled,
    CompileResult,
    Empty,
)


class PatternNotAppliableError(Exception):
    """Raised when a compile result has no executable pattern."""

    def __init__(self, result: CompileResult) -> None:
        self.result = result
        if isinstance(result, Empty):
            message = "No valid conditions; there is no pattern to apply"
        else:
            message = "Conditions cannot be combined into one pattern: " + "; ".join(
                conflict_messages(result)
            )
        super().__init__(message)


def conflict_messages(result: CompileResult) -> list[str]:
    """Guidance lines explaining why a result is advisory.

    Args:
        result: Outcome of compile_conditions.

    Returns:
        Messages in detection order; empty for Empty and Compiled results.
    """
    if isinstance(result, Advisory):
        return list(result.reasons.messages)
    return []


def is_appliable(result: CompileResult) -> bool:
    """True only for a Compiled result."""
    return isinstance(result, Compiled)


def require_appliable(result: CompileResult) -> str:
    """Return the executable pattern or refuse.

    Args:
        result: Outcome of compile_conditions.

    Returns:
        The compiled regex.

    Raises:
        PatternNotAppliableError: If the result is Empty or Advisory.
    """
    if isinstance(result, Compiled):
        return result.pattern
    raise PatternNotAppliableError(result)
