"""Logging configuration for VERSYNC.

Records each run to a file: the resolved source and target manifests, every
line printed to the console, and warnings from the syncer such as a target
with no version line. Off unless explicitly enabled, so CI output stays
limited to the single confirmation line.

Environment Variables:
    VERSYNC_LOG: Set to "true" to enable logging (default: "false")
    VERSYNC_LOG_FILE: Path to log file (default: ~/.versync.log)
"""

import logging
import os
from pathlib import Path

# Environment variable configuration
LOG_ENABLED = os.environ.get("VERSYNC_LOG", "false").lower() == "true"
LOG_FILE = Path(os.environ.get("VERSYNC_LOG_FILE", str(Path.home() / ".versync.log")))

# Module-level logger instance
_logger: logging.Logger | None = None


def setup_logging() -> logging.Logger:
    """Configure the "versync" package logger.

    Attaches a file handler when VERSYNC_LOG is "true". Otherwise a
    NullHandler keeps syncer warnings off stderr for library callers.

    Returns:
        Configured logger instance
    """
    global _logger

    if _logger is not None:
        return _logger

    logger = logging.getLogger("versync")
    logger.handlers.clear()

    if LOG_ENABLED:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(LOG_FILE)
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    else:
        logger.addHandler(logging.NullHandler())

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """Get the configured logger instance, creating it if necessary."""
    global _logger
    if _logger is None:
        return setup_logging()
    return _logger


def log_message(message: str) -> None:
    """Append a run event (paths, confirmation, errors) to the log file.

    A no-op unless VERSYNC_LOG=true.
    """
    logger = get_logger()
    logger.info(message)


__all__ = [
    "LOG_ENABLED",
    "LOG_FILE",
    "setup_logging",
    "get_logger",
    "log_message",
]
