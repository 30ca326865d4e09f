"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to functions)
2. Environment variables (RPB_*)
3. Config file (~/.rpb/config.toml)
4. Default values

Environment variables:
- RPB_CONFIG_PATH: Path to config file (overrides default location)
- RPB_LOG_LEVEL: Log level (debug, info, warning, error)
- RPB_LOG_FILE: Log file path
- RPB_LOG_FORMAT: Log format (text, json)
- RPB_DEFAULT_COMBINATOR: Combinator for documents without one (AND, OR)
- RPB_DEFAULT_CASE_SENSITIVE: Case sensitivity for conditions without one
"""

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from release_pattern_builder.config.env import EnvReader
from release_pattern_builder.config.models import (
    AppConfig,
    BuilderConfig,
    LoggingConfig,
)

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG_DIR = Path.home() / ".rpb"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"


def get_default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the config file path, honouring RPB_CONFIG_PATH."""
    return EnvReader(env).get_path("RPB_CONFIG_PATH", DEFAULT_CONFIG_FILE)


def load_config_file(
    path: Path | None = None, env: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        path: Path to config file. If None, uses default location.
        env: Environment mapping used to resolve the default location.

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist
        or cannot be parsed.
    """
    if path is None:
        path = get_default_config_path(env)

    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        with path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to load config file %s: %s", path, e)
        return {}

    logger.debug("Loaded config from %s", path)
    return config


def get_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> AppConfig:
    """Get configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides RPB_CONFIG_PATH).
        env: Environment mapping; os.environ when None.

    Returns:
        AppConfig with merged configuration.

    Raises:
        ValueError: If a merged value fails validation.
    """
    reader = EnvReader(env)
    file_config = load_config_file(config_path, env)

    logging_file = file_config.get("logging", {})
    file_log_path = logging_file.get("file")
    logging_config = LoggingConfig(
        level=reader.get_str("RPB_LOG_LEVEL", logging_file.get("level", "info")),
        file=reader.get_path(
            "RPB_LOG_FILE",
            Path(file_log_path).expanduser() if file_log_path else None,
        ),
        format=reader.get_str("RPB_LOG_FORMAT", logging_file.get("format", "text")),
        include_stderr=logging_file.get("include_stderr", False),
        max_bytes=logging_file.get("max_bytes", 10_485_760),
        backup_count=logging_file.get("backup_count", 5),
    )

    builder_file = file_config.get("builder", {})
    builder = BuilderConfig(
        default_combinator=reader.get_str(
            "RPB_DEFAULT_COMBINATOR",
            builder_file.get("default_combinator", "AND"),
        ),
        default_case_sensitive=reader.get_bool(
            "RPB_DEFAULT_CASE_SENSITIVE",
            builder_file.get("default_case_sensitive", False),
        ),
    )

    return AppConfig(logging=logging_config, builder=builder)
