"""Tests for versync.utils.logging module."""

import importlib
import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

import versync.utils.logging as logging_module


@pytest.fixture(autouse=True)
def reset_logging_module():
    """Restore the module to its environment-free state after each test."""
    yield
    for handler in logging.getLogger("versync").handlers:
        handler.close()
    logging.getLogger("versync").handlers.clear()
    with patch.dict(os.environ, {}, clear=True):
        logging_module._logger = None
        importlib.reload(logging_module)
    logging_module._logger = None


class TestLogging:
    """Tests for logging functionality."""

    def test_log_disabled_by_default(self):
        with patch.dict(os.environ, {}, clear=True):
            logging_module._logger = None
            importlib.reload(logging_module)

            assert logging_module.LOG_ENABLED is False

    def test_log_enabled_with_env_var(self):
        with patch.dict(os.environ, {"VERSYNC_LOG": "true"}):
            logging_module._logger = None
            importlib.reload(logging_module)

            assert logging_module.LOG_ENABLED is True

    def test_log_file_custom_path(self):
        custom_path = "/tmp/custom-versync.log"
        with patch.dict(os.environ, {"VERSYNC_LOG_FILE": custom_path}):
            logging_module._logger = None
            importlib.reload(logging_module)

            assert str(logging_module.LOG_FILE) == custom_path

    def test_log_file_default_path(self):
        with patch.dict(os.environ, {}, clear=True):
            importlib.reload(logging_module)

            assert logging_module.LOG_FILE == Path.home() / ".versync.log"

    def test_setup_logging_returns_logger(self):
        logging_module._logger = None
        logger = logging_module.setup_logging()

        assert logger.name == "versync"

    def test_get_logger_returns_same_instance(self):
        logging_module._logger = None

        assert logging_module.get_logger() is logging_module.get_logger()

    def test_log_message_written_when_enabled(self, tmp_path):
        log_file = tmp_path / "logs" / "versync.log"
        env = {"VERSYNC_LOG": "true", "VERSYNC_LOG_FILE": str(log_file)}
        with patch.dict(os.environ, env):
            logging_module._logger = None
            importlib.reload(logging_module)

            logging_module.log_message("Synced version 1.0.0 to Cargo.toml")
            for handler in logging_module.get_logger().handlers:
                handler.flush()

        assert "Synced version 1.0.0 to Cargo.toml" in log_file.read_text()
