"""Tests for the JSON logger and config parsing helpers."""

import json
import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from core.logger import TelebindLogger, _JsonFormatter, redact_tokens

from conftest import TOKEN


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="telebind.network", level=logging.WARNING, pathname=__file__,
        lineno=1, msg=msg, args=(), exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


# ── Formatter ────────────────────────────────────────────────────────────────


class TestJsonFormatter:
    def test_standard_fields(self) -> None:
        entry = json.loads(_JsonFormatter().format(_record("hello")))
        assert entry["level"] == "WARNING"
        assert entry["logger"] == "telebind.network"
        assert entry["message"] == "hello"
        assert "timestamp" in entry

    def test_extra_keys_are_merged(self) -> None:
        entry = json.loads(_JsonFormatter().format(_record("API error", api_endpoint="sendMessage", error_code=429)))
        assert entry["api_endpoint"] == "sendMessage"
        assert entry["error_code"] == 429

    def test_token_is_redacted(self) -> None:
        entry = json.loads(_JsonFormatter().format(_record(f"POST /bot{TOKEN}/getMe failed")))
        assert TOKEN not in entry["message"]
        assert "<token>" in entry["message"]


def test_redact_tokens_leaves_other_text() -> None:
    assert redact_tokens("chat 12345 not found") == "chat 12345 not found"


# ── Singleton ────────────────────────────────────────────────────────────────


class TestTelebindLogger:
    @pytest.fixture(autouse=True)
    def _fresh(self):
        TelebindLogger.reset()
        yield
        TelebindLogger.reset()

    def test_singleton(self) -> None:
        assert TelebindLogger() is TelebindLogger()

    def test_logger_name(self) -> None:
        assert TelebindLogger.get_logger().name == "telebind"

    def test_rotating_file(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "telebind.log"
        logger = TelebindLogger.get_logger(logging.DEBUG, str(log_file))
        logger.info("started", extra={"api_url": "https://api.telegram.org"})
        for handler in logger.handlers:
            handler.flush()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert json.loads(line)["api_url"] == "https://api.telegram.org"

    def test_module_loggers_propagate(self) -> None:
        TelebindLogger.get_logger()
        assert logging.getLogger("telebind.client").parent.name == "telebind"


# ── config helpers ───────────────────────────────────────────────────────────


class TestConfigParsing:
    @pytest.fixture(autouse=True)
    def _fresh(self):
        TelebindLogger.reset()
        yield
        TelebindLogger.reset()

    def test_timeout(self) -> None:
        from config import _parse_timeout

        assert _parse_timeout(None) == (10.0, True)
        assert _parse_timeout("2.5") == (2.5, True)
        assert _parse_timeout("soon") == (10.0, False)
        assert _parse_timeout("0") == (10.0, False)

    def test_log_level(self) -> None:
        from config import _parse_log_level

        assert _parse_log_level("debug") == logging.DEBUG
        assert _parse_log_level(None) == logging.INFO
        assert _parse_log_level("LOUD") == logging.INFO
