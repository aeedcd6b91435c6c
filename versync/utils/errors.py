"""Custom exceptions and exit codes for VERSYNC.

This module defines the exit codes and exception hierarchy used throughout
the application. Every failure is fatal to the run and maps to one exit code.
"""

from enum import IntEnum
from pathlib import Path
from typing import ClassVar


class ExitCode(IntEnum):
    """Process exit codes.

    Code 2 is left to Typer/Click usage errors so CI systems can tell a
    bad invocation apart from a bad manifest.
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    MANIFEST_NOT_FOUND = 3
    MANIFEST_INVALID = 4
    WRITE_FAILED = 5
    VERSION_MISMATCH = 6


class VersyncError(Exception):
    """Base exception for VERSYNC errors.

    All custom exceptions in this application should inherit from this class.
    Each exception type has an associated exit code for proper error reporting.
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.GENERAL_ERROR

    def __init__(self, message: str, exit_code: ExitCode | None = None) -> None:
        """Initialize the exception."""
        super().__init__(message)
        self._exit_code = exit_code

    @property
    def exit_code(self) -> ExitCode:
        """Get the exit code for this exception."""
        if self._exit_code is not None:
            return self._exit_code
        return self.__class__._default_exit_code


class ManifestError(VersyncError):
    """A manifest file could not be used.

    Attributes:
        path: The manifest the error refers to
    """

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        exit_code: ExitCode | None = None,
    ) -> None:
        self.path = Path(path) if path is not None else None
        super().__init__(message, exit_code)


class ManifestNotFoundError(ManifestError):
    """Manifest is missing or cannot be read.

    Raised when:
    - The source or target manifest does not exist
    - The file exists but is a directory or lacks read permission
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.MANIFEST_NOT_FOUND


class ManifestParseError(ManifestError):
    """Manifest content is not in the expected format.

    Raised when:
    - The source manifest is not valid JSON or not a JSON object
    - The source ``version`` value is not a string
    - Either manifest is not valid UTF-8
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.MANIFEST_INVALID


class MissingVersionError(ManifestError):
    """The source manifest has no ``version`` field."""

    _default_exit_code: ClassVar[ExitCode] = ExitCode.MANIFEST_INVALID


class ManifestWriteError(ManifestError):
    """The target manifest could not be written.

    The target keeps its pre-run content since the write is a single
    full-content replace.
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.WRITE_FAILED


class VersionMismatchError(ManifestError):
    """Target version differs from the source (check mode only).

    Attributes:
        expected: Version declared by the source manifest
        found: Version found in the target, or None when it has no version line
    """

    _default_exit_code: ClassVar[ExitCode] = ExitCode.VERSION_MISMATCH

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        expected: str | None = None,
        found: str | None = None,
    ) -> None:
        self.expected = expected
        self.found = found
        super().__init__(message, path)


__all__ = [
    "ExitCode",
    "VersyncError",
    "ManifestError",
    "ManifestNotFoundError",
    "ManifestParseError",
    "MissingVersionError",
    "ManifestWriteError",
    "VersionMismatchError",
]
