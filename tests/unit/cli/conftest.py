"""Fixtures for CLI tests."""

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, reset_root_logger):
    """Point the CLI at an empty config and clear RPB_* overrides."""
    for var in (
        "RPB_LOG_LEVEL",
        "RPB_LOG_FILE",
        "RPB_LOG_FORMAT",
        "RPB_DEFAULT_COMBINATOR",
        "RPB_DEFAULT_CASE_SENSITIVE",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("RPB_CONFIG_PATH", str(tmp_path / "config.toml"))
    yield tmp_path / "config.toml"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
