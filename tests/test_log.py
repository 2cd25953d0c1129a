"""Tests for logging setup."""

import logging
import sys

from fitocrat.utils.log import configure_logging


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_logs_go_to_stderr(self):
        logger = configure_logging("DEBUG")

        assert logger.name == "fitocrat"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.handlers[0].stream is sys.stderr
        assert logger.propagate is False

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "info")
        assert configure_logging().level == logging.INFO

    def test_reconfigure_replaces_handler(self):
        configure_logging("DEBUG")
        logger = configure_logging("WARNING")

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
