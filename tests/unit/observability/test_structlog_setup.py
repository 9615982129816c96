"""Unit tests for structlog configuration helpers."""

from __future__ import annotations

import json
import logging

import pytest
import structlog

from mp_analytics.observability import JsonLoggerFactory, get_logger


@pytest.fixture(autouse=True)
def _reset_logging():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


class TestJsonLoggerFactory:
    def test_installs_single_root_handler(self) -> None:
        JsonLoggerFactory.configure(logging.DEBUG)
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG

    def test_renders_json_with_service(self, capsys: pytest.CaptureFixture[str]) -> None:
        JsonLoggerFactory.configure(logging.INFO, service="portal")
        get_logger("tests").info("hello", answer=42)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "hello"
        assert payload["answer"] == 42
        assert payload["service"] == "portal"
        assert payload["level"] == "info"


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with structlog.testing.capture_logs() as logs:
            get_logger("tests", request="r1").info("bound")
        assert logs == [{"event": "bound", "request": "r1", "log_level": "info"}]
