"""Settings dataclass for VERSYNC configuration.

Manifest locations are only defaulted here, at the outermost layer; the
syncer itself always receives explicit paths.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

# Conventional manifest names in the project root
DEFAULT_SOURCE_MANIFEST = "package.json"
DEFAULT_TARGET_MANIFEST = "Cargo.toml"


@dataclass
class Settings:
    """Configuration settings for a single run.

    Attributes:
        source: Path to the JSON manifest providing the version
        target: Path to the TOML manifest whose version line is rewritten
        directory: Base directory for relative manifest paths
        dry_run: Compute the rewrite without writing the target
        check: Only verify that the target is already in sync
    """

    source: Path = field(default_factory=lambda: Path(DEFAULT_SOURCE_MANIFEST))
    target: Path = field(default_factory=lambda: Path(DEFAULT_TARGET_MANIFEST))
    directory: Path = field(default_factory=lambda: Path("."))
    dry_run: bool = False
    check: bool = False

    def resolve_paths(self) -> tuple[Path, Path]:
        """Return (source, target) with relative paths joined onto directory."""
        return self._resolve(self.source), self._resolve(self.target)

    def _resolve(self, path: Path) -> Path:
        path = Path(path).expanduser()
        if path.is_absolute():
            return path
        return Path(self.directory).expanduser() / path


__all__ = [
    "Settings",
    "DEFAULT_SOURCE_MANIFEST",
    "DEFAULT_TARGET_MANIFEST",
]
