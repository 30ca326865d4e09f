"""Tests for cli/exit_codes.py module."""

from release_pattern_builder.cli.exit_codes import ExitCode


class TestExitCode:
    """Tests for ExitCode enum."""

    def test_success_is_zero(self) -> None:
        assert ExitCode.SUCCESS == 0

    def test_exit_codes_are_unique(self) -> None:
        """All exit codes should have unique values."""
        values = [int(code) for code in ExitCode]
        assert len(values) == len(set(values))

    def test_exit_code_ranges(self) -> None:
        """Exit codes should be within expected ranges."""
        assert 10 <= ExitCode.VALIDATION_ERROR <= 19
        assert 10 <= ExitCode.CONFIG_ERROR <= 19

        assert 20 <= ExitCode.TARGET_NOT_FOUND <= 29

        assert 40 <= ExitCode.EMPTY_PATTERN <= 49
        assert 40 <= ExitCode.ADVISORY_PATTERN <= 49
        assert 40 <= ExitCode.INVALID_PATTERN <= 49

    def test_every_code_is_used_by_a_command(self) -> None:
        assert {int(code) for code in ExitCode} == {0, 10, 11, 20, 40, 41, 42}

    def test_compile_outcome_values(self) -> None:
        assert ExitCode.EMPTY_PATTERN == 40
        assert ExitCode.ADVISORY_PATTERN == 41
        assert ExitCode.INVALID_PATTERN == 42
