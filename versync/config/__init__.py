"""Configuration for VERSYNC."""

from versync.config.settings import (
    DEFAULT_SOURCE_MANIFEST,
    DEFAULT_TARGET_MANIFEST,
    Settings,
)

__all__ = [
    "DEFAULT_SOURCE_MANIFEST",
    "DEFAULT_TARGET_MANIFEST",
    "Settings",
]
