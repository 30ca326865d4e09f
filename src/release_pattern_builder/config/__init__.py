"""Configuration management for Release Pattern Builder.

This module provides configuration loading with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (RPB_*)
3. Config file (~/.rpb/config.toml)
4. Default values (lowest priority)
"""

from release_pattern_builder.config.env import EnvReader
from release_pattern_builder.config.loader import (
    get_config,
    get_default_config_path,
    load_config_file,
)
from release_pattern_builder.config.logging_factory import (
    build_logging_config,
    configure_logging_from_cli,
)
from release_pattern_builder.config.models import (
    AppConfig,
    BuilderConfig,
    LoggingConfig,
)

__all__ = [
    # Models
    "AppConfig",
    "BuilderConfig",
    "LoggingConfig",
    # Loader
    "get_config",
    "get_default_config_path",
    "load_config_file",
    "EnvReader",
    "build_logging_config",
    "configure_logging_from_cli",
]
