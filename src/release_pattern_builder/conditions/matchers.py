"""Pattern testing against sample release names.

Compiled patterns target a PCRE-like engine with scoped inline flags and
lookaheads, so they are evaluated with the ``regex`` library in VERSION1
mode rather than the standard ``re`` module.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import regex

from release_pattern_builder.conditions.models import CompileResult
from release_pattern_builder.conditions.reporting import require_appliable

_FLAGS = regex.VERSION1


@dataclass(frozen=True)
class LineResult:
    """Outcome of testing one sample line."""

    text: str
    matched: bool
    match_text: str | None = None


class PatternTester:
    """Tests sample text against a compiled pattern.

    The pattern is compiled once and reused. No case folding is added;
    an inline ``(?i)`` in the pattern decides case sensitivity.
    """

    def __init__(self, pattern: str) -> None:
        """Initialize the tester.

        Args:
            pattern: Regex produced by the compiler.

        Raises:
            ValueError: If the pattern is not valid regex.
        """
        self._pattern = pattern
        try:
            self._compiled = regex.compile(pattern, _FLAGS)
        except regex.error as e:
            raise ValueError(f"Invalid regex pattern {pattern!r}: {e}") from e

    @classmethod
    def from_result(cls, result: CompileResult) -> PatternTester:
        """Build a tester from a compile result.

        Raises:
            PatternNotAppliableError: If the result is Empty or Advisory.
        """
        return cls(require_appliable(result))

    @property
    def pattern(self) -> str:
        """Get the original pattern string."""
        return self._pattern

    def matches(self, text: str) -> bool:
        """Check whether the pattern matches anywhere in the text."""
        return self._compiled.search(text) is not None

    def test_lines(self, lines: Iterable[str]) -> list[LineResult]:
        """Test each non-blank line.

        Args:
            lines: Sample release names, one per item.

        Returns:
            One LineResult per non-blank line, in input order.
        """
        results = []
        for line in lines:
            if not line.strip():
                continue
            match = self._compiled.search(line)
            results.append(
                LineResult(
                    text=line,
                    matched=match is not None,
                    match_text=match.group(0) if match else None,
                )
            )
        return results


def validate_pattern(pattern: str) -> str | None:
    """Return the engine's error message for an invalid pattern, else None."""
    try:
        regex.compile(pattern, _FLAGS)
    except regex.error as e:
        return str(e)
    return None
