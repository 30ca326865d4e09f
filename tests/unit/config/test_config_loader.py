"""Tests for configuration loading, models and the env reader."""

from __future__ import annotations

from pathlib import Path

import pytest

from release_pattern_builder.config.env import EnvReader
from release_pattern_builder.config.loader import (
    DEFAULT_CONFIG_FILE,
    get_config,
    get_default_config_path,
    load_config_file,
)
from release_pattern_builder.config.models import BuilderConfig, LoggingConfig


class TestEnvReader:
    """Tests for EnvReader class."""

    def test_get_str(self) -> None:
        reader = EnvReader(env={"MY_VAR": "hello"})
        assert reader.get_str("MY_VAR") == "hello"
        assert reader.get_str("OTHER", "default") == "default"

    def test_get_int_invalid_returns_default(self) -> None:
        reader = EnvReader(env={"MY_VAR": "abc"})
        assert reader.get_int("MY_VAR", 5) == 5

    @pytest.mark.parametrize(
        ("value", "expected"),
        [("true", True), ("1", True), ("YES", True), ("on", True), ("no", False)],
    )
    def test_get_bool(self, value: str, expected: bool) -> None:
        reader = EnvReader(env={"MY_VAR": value})
        assert reader.get_bool("MY_VAR", False) is expected

    def test_get_path_expands_user(self) -> None:
        reader = EnvReader(env={"MY_VAR": "~/rpb.log"})
        assert reader.get_path("MY_VAR") == Path.home() / "rpb.log"

    def test_get_path_empty_returns_default(self) -> None:
        reader = EnvReader(env={"MY_VAR": ""})
        assert reader.get_path("MY_VAR") is None


class TestConfigModels:
    """Tests for config dataclass validation."""

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValueError, match="level must be one of"):
            LoggingConfig(level="verbose")

    def test_invalid_log_format(self) -> None:
        with pytest.raises(ValueError, match="format must be one of"):
            LoggingConfig(format="xml")

    def test_combinator_normalized(self) -> None:
        assert BuilderConfig(default_combinator="or").default_combinator == "OR"

    def test_invalid_combinator(self) -> None:
        with pytest.raises(ValueError, match="default_combinator"):
            BuilderConfig(default_combinator="XOR")


class TestLoadConfigFile:
    """Tests for load_config_file function."""

    def test_missing_file(self, tmp_path: Path) -> None:
        assert load_config_file(tmp_path / "missing.toml") == {}

    def test_invalid_toml_is_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text("[logging\nlevel = ")
        assert load_config_file(path) == {}

    def test_default_path_from_env(self, tmp_path: Path) -> None:
        env = {"RPB_CONFIG_PATH": str(tmp_path / "custom.toml")}
        assert get_default_config_path(env) == tmp_path / "custom.toml"
        assert get_default_config_path({}) == DEFAULT_CONFIG_FILE


class TestGetConfig:
    """Tests for get_config precedence."""

    def test_defaults(self, tmp_path: Path) -> None:
        config = get_config(config_path=tmp_path / "missing.toml", env={})
        assert config.logging.level == "info"
        assert config.logging.file is None
        assert config.builder.default_combinator == "AND"
        assert config.builder.default_case_sensitive is False

    def test_file_values(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text(
            '[logging]\nlevel = "debug"\nformat = "json"\n'
            '[builder]\ndefault_combinator = "OR"\ndefault_case_sensitive = true\n'
        )
        config = get_config(config_path=path, env={})
        assert config.logging.level == "debug"
        assert config.logging.format == "json"
        assert config.builder.default_combinator == "OR"
        assert config.builder.default_case_sensitive is True

    def test_env_overrides_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('[builder]\ndefault_combinator = "OR"\n')
        env = {
            "RPB_DEFAULT_COMBINATOR": "AND",
            "RPB_DEFAULT_CASE_SENSITIVE": "1",
            "RPB_LOG_LEVEL": "warning",
        }
        config = get_config(config_path=path, env=env)
        assert config.builder.default_combinator == "AND"
        assert config.builder.default_case_sensitive is True
        assert config.logging.level == "warning"

    def test_config_path_from_env(self, tmp_path: Path) -> None:
        path = tmp_path / "other.toml"
        path.write_text('[logging]\nlevel = "error"\n')
        config = get_config(env={"RPB_CONFIG_PATH": str(path)})
        assert config.logging.level == "error"

    def test_invalid_value_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            get_config(
                config_path=tmp_path / "missing.toml",
                env={"RPB_LOG_FORMAT": "xml"},
            )
