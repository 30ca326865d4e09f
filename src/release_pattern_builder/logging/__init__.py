"""Structured logging module for Release Pattern Builder.

Provides configurable logging with JSON format support and file rotation.
"""

from release_pattern_builder.logging.config import (
    PACKAGE_LOGGER,
    build_formatter,
    configure_logging,
    install_null_handler,
)
from release_pattern_builder.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "PACKAGE_LOGGER",
    "build_formatter",
    "configure_logging",
    "install_null_handler",
]
