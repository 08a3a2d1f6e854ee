"""Tests for environment-driven settings and log formatting.

Run with: pytest tests/test_settings.py -v
"""

import importlib
import json
import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from config import settings as settings_module


@pytest.fixture
def reload_settings(monkeypatch):
    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(settings_module)

    yield _reload
    monkeypatch.undo()
    importlib.reload(settings_module)


class TestEnvironmentSettings:
    """Tests for settings read from environment variables."""

    def test_defaults(self, reload_settings, monkeypatch):
        """Without overrides, debug is off and purchases log at INFO."""
        monkeypatch.delenv("DJANGO_DEBUG", raising=False)
        monkeypatch.delenv("TICKETS_LOG_LEVEL", raising=False)

        module = reload_settings()

        assert module.DEBUG is False
        assert module.LOGGING["loggers"]["purchases"]["level"] == "INFO"

    def test_debug_enabled(self, reload_settings):
        """DJANGO_DEBUG=true turns debug on."""
        module = reload_settings(DJANGO_DEBUG="True")

        assert module.DEBUG is True

    def test_log_level_override(self, reload_settings):
        """TICKETS_LOG_LEVEL sets the purchases logger level."""
        module = reload_settings(TICKETS_LOG_LEVEL="DEBUG")

        assert module.LOGGING["loggers"]["purchases"]["level"] == "DEBUG"


class TestJsonLogging:
    """Tests for the configured console formatter."""

    def test_console_handler_writes_json(self):
        """The root console handler renders records as JSON with extras."""
        formatter = next(
            handler.formatter
            for handler in logging.getLogger().handlers
            if isinstance(handler.formatter, JsonFormatter)
        )
        record = logging.LogRecord(
            name="purchases.services.ticket_service",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Purchase completed",
            args=(),
            exc_info=None,
        )
        record.account_id = 1

        payload = json.loads(formatter.format(record))

        assert payload["levelname"] == "INFO"
        assert payload["name"] == "purchases.services.ticket_service"
        assert payload["message"] == "Purchase completed"
        assert payload["account_id"] == 1
