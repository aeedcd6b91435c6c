"""Test helper utilities for the VERSYNC project."""

from tests.helpers.manifests import SAMPLE_CARGO

__all__ = ["SAMPLE_CARGO"]
