"""Shared pytest fixtures for VERSYNC tests."""

import json
from pathlib import Path

import pytest

from tests.helpers.manifests import SAMPLE_CARGO


@pytest.fixture
def write_package_json(tmp_path: Path):
    """Return a helper that writes package.json into tmp_path."""

    def _write(data, name: str = "package.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return path

    return _write


@pytest.fixture
def package_json(write_package_json) -> Path:
    """Create a package.json declaring version 0.4.1."""
    return write_package_json({"name": "demo", "version": "0.4.1"})


@pytest.fixture
def cargo_toml(tmp_path: Path) -> Path:
    """Create a Cargo.toml declaring version 0.3.0."""
    path = tmp_path / "Cargo.toml"
    path.write_text(SAMPLE_CARGO)
    return path


@pytest.fixture
def project(tmp_path: Path, package_json: Path, cargo_toml: Path) -> Path:
    """A project directory with both manifests."""
    return tmp_path
