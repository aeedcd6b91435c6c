"""VERSYNC - Keep a Cargo manifest's version in step with package.json.

This package provides a small Python CLI that copies the version declared
in a JSON source manifest into the version line of a TOML target manifest.
"""

__version__ = "0.1.0"
SCRIPT_NAME = "VERSYNC"

__all__ = [
    "__version__",
    "SCRIPT_NAME",
]
