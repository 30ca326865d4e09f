"""Visual condition builder: conditions in, one regular expression out."""

from release_pattern_builder.conditions.compiler import (
    compile_conditions,
    compile_pattern,
)
from release_pattern_builder.conditions.escaping import escape_literal
from release_pattern_builder.conditions.loader import (
    ConditionSetValidationError,
    load_condition_set,
)
from release_pattern_builder.conditions.matchers import PatternTester
from release_pattern_builder.conditions.models import (
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
from release_pattern_builder.conditions.operators import build_fragment
from release_pattern_builder.conditions.reporting import (
    PatternNotAppliableError,
    conflict_messages,
    require_appliable,
)

__all__ = [
    "Advisory",
    "AdvisoryReasons",
    "Combinator",
    "CompileResult",
    "Compiled",
    "CompiledPattern",
    "Condition",
    "ConditionSetValidationError",
    "Empty",
    "Operator",
    "PatternNotAppliableError",
    "PatternTester",
    "build_fragment",
    "compile_conditions",
    "compile_pattern",
    "conflict_messages",
    "escape_literal",
    "load_condition_set",
    "require_appliable",
]
