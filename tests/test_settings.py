"""Tests for versync.config.settings module."""

from pathlib import Path

from versync.config.settings import (
    DEFAULT_SOURCE_MANIFEST,
    DEFAULT_TARGET_MANIFEST,
    Settings,
)


class TestSettings:
    def test_default_values(self):
        settings = Settings()

        assert settings.source == Path(DEFAULT_SOURCE_MANIFEST)
        assert settings.target == Path(DEFAULT_TARGET_MANIFEST)
        assert settings.directory == Path(".")
        assert settings.dry_run is False
        assert settings.check is False

    def test_conventional_names(self):
        assert DEFAULT_SOURCE_MANIFEST == "package.json"
        assert DEFAULT_TARGET_MANIFEST == "Cargo.toml"

    def test_resolve_relative_paths(self, tmp_path):
        settings = Settings(directory=tmp_path)

        assert settings.resolve_paths() == (tmp_path / "package.json", tmp_path / "Cargo.toml")

    def test_absolute_paths_ignore_directory(self, tmp_path):
        source = tmp_path / "a" / "package.json"
        settings = Settings(source=source, directory=Path("/elsewhere"))

        resolved_source, resolved_target = settings.resolve_paths()

        assert resolved_source == source
        assert resolved_target == Path("/elsewhere") / "Cargo.toml"
