"""Tests for the field catalog and the pattern tester."""

import pytest

from release_pattern_builder.conditions.compiler import compile_conditions
from release_pattern_builder.conditions.fields import (
    FIELD_PRESETS,
    FIELDS,
    field_presets,
    get_field,
    is_known_field,
)
from release_pattern_builder.conditions.matchers import (
    LineResult,
    PatternTester,
    validate_pattern,
)
from release_pattern_builder.conditions.models import Combinator, Empty, Operator
from release_pattern_builder.conditions.reporting import PatternNotAppliableError


class TestFieldCatalog:
    """Tests for FIELDS and FIELD_PRESETS."""

    def test_release_title_is_first(self) -> None:
        assert FIELDS[0].key == "releaseTitle"
        assert FIELDS[0].label == "Release Name"

    def test_get_field(self) -> None:
        info = get_field("hdr")
        assert info is not None
        assert info.label == "HDR Format"

    def test_unknown_field(self) -> None:
        assert get_field("bitrate") is None
        assert is_known_field("bitrate") is False

    def test_presets(self) -> None:
        assert "1080p" in field_presets("resolution")
        assert r"DTS-HD\.MA" in field_presets("audio")

    def test_field_without_presets(self) -> None:
        """releaseTitle and releaseGroup have no presets."""
        assert field_presets("releaseTitle") == ()
        assert field_presets("releaseGroup") == ()

    def test_presets_only_for_known_fields(self) -> None:
        assert set(FIELD_PRESETS) <= {info.key for info in FIELDS}

    @pytest.mark.parametrize(
        "preset", [p for presets in FIELD_PRESETS.values() for p in presets]
    )
    def test_presets_are_valid_regex(self, preset: str) -> None:
        """Presets can be used directly with the matches operator."""
        assert validate_pattern(preset) is None


class TestPatternTester:
    """Tests for PatternTester class."""

    def test_invalid_pattern_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid regex pattern"):
            PatternTester("(unclosed")

    def test_validate_pattern_reports_error(self) -> None:
        assert validate_pattern("[abc") is not None
        assert validate_pattern("(?=.*(?i)x264).*") is None

    def test_matches_uses_pattern_case(self) -> None:
        """No case folding is added beyond the pattern's own flag."""
        assert PatternTester("x264").matches("Movie.X264") is False
        assert PatternTester("(?i)x264").matches("Movie.X264") is True

    def test_test_lines(self) -> None:
        tester = PatternTester("(?i)^The.*Remastered$")
        results = tester.test_lines(
            ["The.Thing.1982.Remastered", "", "  ", "Alien.1979.Remastered"]
        )
        assert results == [
            LineResult("The.Thing.1982.Remastered", True, "The.Thing.1982.Remastered"),
            LineResult("Alien.1979.Remastered", False, None),
        ]

    def test_from_result(self, make_condition) -> None:
        result = compile_conditions(
            [
                make_condition(Operator.CONTAINS, "x264"),
                make_condition(Operator.CONTAINS, "HEVC"),
            ],
            Combinator.AND,
        )
        tester = PatternTester.from_result(result)
        assert tester.pattern == "(?=.*(?i)x264)(?=.*(?i)HEVC).*"
        assert tester.matches("movie.hevc.x264") is True
        assert tester.matches("movie.hevc") is False

    def test_from_result_rejects_empty(self) -> None:
        with pytest.raises(PatternNotAppliableError):
            PatternTester.from_result(Empty())
