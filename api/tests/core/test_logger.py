"""Unit tests for core.logger module.

Tests the structlog configuration:
- configure_logging() installs a single stdout handler on the root logger
- LOG_LEVEL and LOG_FORMAT environment variables are honoured
- Noisy third-party loggers are quieted
- get_logger() returns a structlog logger that accepts key/value context
"""

import json
import logging

import pytest

from core.logger import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def _clean_root_logger():
    """Save and restore root logger state around each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    clear_contextvars()


@pytest.mark.unit
class TestConfigureLogging:
    def test_installs_single_handler(self, monkeypatch):
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_respects_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        configure_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_log_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_quiets_noisy_loggers(self):
        configure_logging()
        assert logging.getLogger("uvicorn.access").level == logging.WARNING
        assert logging.getLogger("sqlalchemy.engine.Engine").level == logging.WARNING


@pytest.mark.unit
class TestJsonOutput:
    def test_json_format_emits_event_and_context(self, monkeypatch, capsys):
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        configure_logging()

        bind_contextvars(request_id="abc123")
        get_logger("tests.logger").info("center.created", center_id=7)

        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)

        assert payload["event"] == "center.created"
        assert payload["center_id"] == 7
        assert payload["request_id"] == "abc123"
        assert payload["level"] == "info"
        assert payload["logger"] == "tests.logger"


@pytest.mark.unit
class TestGetLogger:
    def test_returns_bindable_logger(self):
        logger = get_logger(__name__)
        bound = logger.bind(entity="Center")
        assert hasattr(bound, "info")
