"""Centralized exit codes for all CLI commands.

Exit code ranges:
    0: Success
    10-19: Validation errors (condition documents, config)
    20-29: Target/file errors
    40-49: Compilation outcomes that produce nothing appliable
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for rpb CLI commands."""

    # Success (0)
    SUCCESS = 0

    # Validation errors (10-19)
    VALIDATION_ERROR = 10
    CONFIG_ERROR = 11

    # Target/file errors (20-29)
    TARGET_NOT_FOUND = 20

    # Compilation outcomes (40-49)
    EMPTY_PATTERN = 40  # No valid conditions
    ADVISORY_PATTERN = 41  # AND combination not expressible as one regex
    INVALID_PATTERN = 42  # Rejected by the regex engine
