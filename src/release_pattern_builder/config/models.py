"""Configuration data models.

This module defines dataclasses for Release Pattern Builder configuration.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class LoggingConfig:
    """Configuration for structured logging."""

    # Log level: debug, info, warning, error
    level: str = "info"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )
        if self.max_bytes < 1:
            raise ValueError("max_bytes must be positive")
        if self.backup_count < 0:
            raise ValueError("backup_count must not be negative")


@dataclass
class BuilderConfig:
    """Defaults applied to condition-set documents."""

    # Combinator used when a document does not name one: AND or OR
    default_combinator: str = "AND"

    # Case sensitivity for conditions that do not set it
    default_case_sensitive: bool = False

    def __post_init__(self) -> None:
        """Validate configuration."""
        self.default_combinator = self.default_combinator.upper()
        valid_combinators = {"AND", "OR"}
        if self.default_combinator not in valid_combinators:
            raise ValueError(
                f"default_combinator must be one of {valid_combinators}, "
                f"got {self.default_combinator}"
            )


@dataclass
class AppConfig:
    """Main configuration container."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    builder: BuilderConfig = field(default_factory=BuilderConfig)
