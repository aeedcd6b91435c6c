"""Copy the version from a JSON manifest into a TOML manifest.

This module defines:
- VersionRewriter: Abstract base class for strategies that locate and
  replace the version declaration in target manifest text
- LineAnchoredRewriter: Raw-text, line-anchored regex substitution
- VersionSyncer: Read source, rewrite target, write target
- SyncResult: Outcome of a run

The target manifest is never parsed as TOML. Only the first line that
starts with a ``version = "..."`` assignment is touched; every other byte
is written back as it was read.
"""

from __future__ import annotations

import json
import logging
import os
import re
import shutil
import tempfile
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from versync.utils.errors import (
    ManifestNotFoundError,
    ManifestParseError,
    ManifestWriteError,
    MissingVersionError,
    VersionMismatchError,
)
from versync.utils.logging import get_logger

logger = logging.getLogger(__name__)

# First line beginning with `version`, then `=`, then a double-quoted string
_VERSION_LINE_PATTERN = re.compile(r'^version\s*=\s*"([^"]*)"', re.MULTILINE)

_ENCODING = "utf-8"


class VersionRewriter(ABC):
    """Locate and replace the version declaration in manifest text."""

    @abstractmethod
    def find_version(self, text: str) -> str | None:
        """Return the currently declared version, or None if there is none."""

    @abstractmethod
    def rewrite(self, text: str, version: str) -> str:
        """Return text with the version declaration set to version.

        Text without a version declaration is returned unchanged.
        """


class LineAnchoredRewriter(VersionRewriter):
    """Replace the first line-anchored ``version = "..."`` assignment.

    Matching is case-sensitive and anchored at line start, so indented keys,
    comments and names such as ``someversion`` are left alone.
    """

    def __init__(self, pattern: re.Pattern[str] = _VERSION_LINE_PATTERN) -> None:
        self.pattern = pattern

    def find_version(self, text: str) -> str | None:
        match = self.pattern.search(text)
        if match is None:
            return None
        return match.group(1)

    def rewrite(self, text: str, version: str) -> str:
        replacement = f'version = "{version}"'
        # A callable keeps backslashes in the version from being read as group refs
        return self.pattern.sub(lambda _match: replacement, text, count=1)


@dataclass(frozen=True)
class SyncResult:
    """Outcome of a sync or check.

    Attributes:
        version: Version read from the source manifest
        target_path: Target manifest the version was synced into
        previous_version: Version the target declared before the run, if any
        changed: Whether the rewrite altered the target text
        written: Whether the target file was written
    """

    version: str
    target_path: Path
    previous_version: str | None
    changed: bool
    written: bool

    @property
    def matched(self) -> bool:
        """Whether the target had a version line to rewrite."""
        return self.previous_version is not None

    @property
    def message(self) -> str:
        return f"Synced version {self.version} to {self.target_path.name}"


def read_source_version(path: Path) -> str:
    """Read the ``version`` field of a JSON manifest.

    Args:
        path: Path to the source manifest

    Returns:
        The version string, unvalidated

    Raises:
        ManifestNotFoundError: File is missing or unreadable
        ManifestParseError: Content is not a JSON object or version is not a string
        MissingVersionError: The object has no ``version`` key
    """
    path = Path(path)
    raw = _read_bytes(path)
    try:
        data = json.loads(raw.decode(_ENCODING))
    except UnicodeDecodeError as e:
        raise ManifestParseError(f"{path} is not valid UTF-8: {e}", path=path) from e
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, oversized integers and runaway nesting
        raise ManifestParseError(f"Failed to parse {path}: {e}", path=path) from e

    if not isinstance(data, dict):
        raise ManifestParseError(
            f"{path} must contain a JSON object, got {type(data).__name__}", path=path
        )
    if "version" not in data:
        raise MissingVersionError(f"{path} has no 'version' field", path=path)

    version = data["version"]
    if not isinstance(version, str):
        raise ManifestParseError(
            f"'version' in {path} must be a string, got {type(version).__name__}",
            path=path,
        )
    return version


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except FileNotFoundError as e:
        raise ManifestNotFoundError(f"Manifest not found: {path}", path=path) from e
    except OSError as e:
        raise ManifestNotFoundError(f"Cannot read {path}: {e}", path=path) from e


def _read_text(path: Path) -> str:
    # Decoding bytes keeps CRLF line endings intact
    raw = _read_bytes(path)
    try:
        return raw.decode(_ENCODING)
    except UnicodeDecodeError as e:
        raise ManifestParseError(f"{path} is not valid UTF-8: {e}", path=path) from e


class VersionSyncer:
    """Copy the source manifest's version into the target manifest.

    Each run performs one read of the source, one read of the target and, unless
    dry-running or checking, one full overwrite of the target, in that order.
    Nothing is written when any earlier step fails.

    Attributes:
        source_path: JSON manifest supplying the version
        target_path: Text manifest whose version line is rewritten
        rewriter: Strategy used to find and replace the version line
    """

    def __init__(
        self,
        source_path: Path | str,
        target_path: Path | str,
        rewriter: VersionRewriter | None = None,
    ) -> None:
        self.source_path = Path(source_path)
        self.target_path = Path(target_path)
        self.rewriter = rewriter or LineAnchoredRewriter()
        # Ensures the package logger has a handler for library callers
        get_logger()

    def sync(self, dry_run: bool = False) -> SyncResult:
        """Rewrite the target's version line to match the source.

        Args:
            dry_run: Compute the result without writing the target

        Returns:
            SyncResult describing the run

        Raises:
            ManifestNotFoundError: Source or target is missing or unreadable
            ManifestParseError: Source is malformed or a file is not UTF-8
            MissingVersionError: Source has no version field
            ManifestWriteError: Target could not be written
        """
        version = read_source_version(self.source_path)
        logger.debug("Read version %s from %s", version, self.source_path)

        original = _read_text(self.target_path)
        previous = self.rewriter.find_version(original)
        updated = self.rewriter.rewrite(original, version)

        if previous is None:
            logger.warning("No version line found in %s", self.target_path)

        written = False
        if not dry_run:
            self._write(updated)
            written = True

        return SyncResult(
            version=version,
            target_path=self.target_path,
            previous_version=previous,
            changed=updated != original,
            written=written,
        )

    def check(self) -> SyncResult:
        """Verify the target already declares the source version.

        Raises:
            VersionMismatchError: Target version differs or is absent
        """
        version = read_source_version(self.source_path)
        text = _read_text(self.target_path)
        found = self.rewriter.find_version(text)

        if found is None:
            raise VersionMismatchError(
                f"No version line found in {self.target_path}",
                path=self.target_path,
                expected=version,
                found=None,
            )
        if found != version:
            raise VersionMismatchError(
                f"Version mismatch: {self.source_path.name}={version} "
                f"vs {self.target_path.name}={found}",
                path=self.target_path,
                expected=version,
                found=found,
            )

        return SyncResult(
            version=version,
            target_path=self.target_path,
            previous_version=found,
            changed=False,
            written=False,
        )

    def _write(self, text: str) -> None:
        target = self.target_path
        if not os.access(target, os.W_OK):
            raise ManifestWriteError(f"Cannot write {target}: permission denied", path=target)
        try:
            self._atomic_write(target, text.encode(_ENCODING))
        except OSError as e:
            raise ManifestWriteError(f"Failed to write {target}: {e}", path=target) from e
        logger.debug("Wrote %s", target)

    @staticmethod
    def _atomic_write(path: Path, data: bytes) -> None:
        """Write data to path via a sibling temp file + rename.

        The target keeps its old content until os.replace() swaps the new
        file in, so a failed or short write never truncates it.

        Raises:
            OSError: If file operations fail
        """
        # Same directory keeps the rename on one filesystem
        fd, tmp_path = tempfile.mkstemp(
            suffix=".tmp",
            prefix=f".{path.name}.",
            dir=path.parent,
        )
        fd_closed = False
        success = False
        try:
            with os.fdopen(fd, "wb") as f:
                fd_closed = True  # os.fdopen takes ownership of fd
                f.write(data)
            shutil.copymode(path, tmp_path)
            os.replace(tmp_path, path)
            success = True
        finally:
            if not fd_closed:
                try:
                    os.close(fd)
                except OSError:
                    pass
            if not success:
                try:
                    os.unlink(tmp_path)
                except OSError:
                    pass


def sync(source_path: Path | str, target_path: Path | str) -> SyncResult:
    """Sync the target manifest's version to the source manifest's."""
    return VersionSyncer(source_path, target_path).sync()


__all__ = [
    "VersionRewriter",
    "LineAnchoredRewriter",
    "SyncResult",
    "VersionSyncer",
    "read_source_version",
    "sync",
]
