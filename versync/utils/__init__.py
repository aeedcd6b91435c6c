"""Utility modules for VERSYNC.

This package contains:
- console: Rich-based terminal output utilities
- errors: Custom exceptions and exit codes
- logging: Logging configuration
"""

from versync.utils.console import (
    console,
    console_err,
    print_error,
    print_plain,
    print_warning,
    show_version,
)
from versync.utils.errors import (
    ExitCode,
    ManifestError,
    ManifestNotFoundError,
    ManifestParseError,
    ManifestWriteError,
    MissingVersionError,
    VersionMismatchError,
    VersyncError,
)
from versync.utils.logging import get_logger, log_message, setup_logging

__all__ = [
    # Console
    "console",
    "console_err",
    "print_error",
    "print_plain",
    "print_warning",
    "show_version",
    # Errors
    "ExitCode",
    "VersyncError",
    "ManifestError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "ManifestWriteError",
    "MissingVersionError",
    "VersionMismatchError",
    # Logging
    "setup_logging",
    "get_logger",
    "log_message",
]
