"""Logging configuration for Release Pattern Builder.

The compiler and loaders only emit records under the ``release_pattern_builder``
logger, which carries a NullHandler so library callers see nothing unless they
configure logging themselves. The ``rpb`` CLI calls configure_logging() once
per invocation.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from release_pattern_builder.logging.handlers import JSONFormatter

if TYPE_CHECKING:
    from release_pattern_builder.config.models import LoggingConfig

PACKAGE_LOGGER = "release_pattern_builder"

_LEVEL_MAP: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}

TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

logger = logging.getLogger(__name__)


def install_null_handler() -> None:
    """Attach a NullHandler to the package logger, once."""
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(isinstance(h, logging.NullHandler) for h in package_logger.handlers):
        package_logger.addHandler(logging.NullHandler())


def build_formatter(log_format: str) -> logging.Formatter:
    """Return the JSON or text formatter named by ``log_format``."""
    if log_format.casefold() == "json":
        return JSONFormatter()
    return logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)


def _open_file_handler(config: LoggingConfig) -> logging.Handler:
    """Open a rotating handler for config.file, creating parent directories.

    Raises:
        OSError: If the directory or file cannot be created.
    """
    path = Path(config.file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(
        path,
        maxBytes=config.max_bytes,
        backupCount=config.backup_count,
        encoding="utf-8",
    )


def configure_logging(config: LoggingConfig) -> None:
    """Configure the root logger from LoggingConfig.

    Replaces any existing root handlers. When the log file cannot be
    opened, output falls back to stderr and a warning is logged there.

    Args:
        config: Logging configuration.
    """
    level = _LEVEL_MAP.get(config.level.casefold(), logging.INFO)
    formatter = build_formatter(config.format)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handlers: list[logging.Handler] = []
    file_error: OSError | None = None
    if config.file:
        try:
            handlers.append(_open_file_handler(config))
        except OSError as e:
            file_error = e

    if config.include_stderr or not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if file_error is not None:
        logger.warning(
            "Could not open log file %s: %s; logging to stderr",
            config.file,
            file_error,
        )
