"""Structured logging helpers and the events adapters emit."""
from __future__ import annotations

import json
import logging

import pytest

from prism_providers.base.errors import TransportError
from prism_providers.base.log_support import JsonFormatter, LogContext
from prism_providers.base.logging import (
    REQUIRED_NORMALIZED_KEYS,
    _parse_level,  # type: ignore[attr-defined]
    configure_logger,
    get_logger,
    normalized_log_event,
)
from prism_providers.openai import Completions
from prism_providers.tests.utils import USER_HI, ListHandler, openai_style_payload


@pytest.fixture()
def captured():
    logger = get_logger("prism.openai")
    handler = ListHandler()
    logger.addHandler(handler)
    yield handler
    logger.removeHandler(handler)


def test_parse_level_variants():
    assert _parse_level(None) == logging.INFO  # nosec B101
    assert _parse_level("debug") == logging.DEBUG  # nosec B101
    assert _parse_level("WARN") == logging.WARNING  # nosec B101
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR  # nosec B101


def test_normalized_log_event_emits_required_keys():
    logger = get_logger("prism.test.logging")
    handler = ListHandler()
    logger.handlers[:] = [handler]

    normalized_log_event(
        logger,
        "completion.error",
        LogContext(provider="p", model="m", operation="completion"),
        phase="finalize",
        error_code="timeout",
        latency_ms=12.5,
        attempt=None,
    )

    payload = json.loads(handler.messages[-1])
    for key in REQUIRED_NORMALIZED_KEYS:
        assert key in payload  # nosec B101
    assert payload["event"] == "completion.error"  # nosec B101
    assert payload["provider"] == "p"  # nosec B101
    assert "attempt" not in payload  # nosec B101


def test_success_events_log_at_info_without_error_code():
    logger = get_logger("prism.test.logging2")
    handler = ListHandler()
    logger.handlers[:] = [handler]
    normalized_log_event(logger, "embedding.end", None, phase="finalize", dimensions=3)
    normalized_log_event(logger, "embedding.error", None, phase="finalize", error_code="parse")
    ok, failed = (json.loads(m) for m in handler.messages)
    assert ok["latency_ms"] is None  # nosec B101
    assert "error_code" not in ok  # nosec B101
    assert failed["error_code"] == "parse"  # nosec B101
    assert handler.levels == [logging.INFO, logging.WARNING]  # nosec B101


def test_completion_success_logs_start_and_end(configured, http_stub, captured):
    http_stub.reply(openai_style_payload("hi"))
    Completions().create(USER_HI)
    events = captured.events()
    assert [e["event"] for e in events] == ["completion.start", "completion.end"]  # nosec B101
    assert events[-1]["provider"] == "openai"  # nosec B101
    assert events[-1]["latency_ms"] >= 0  # nosec B101


def test_completion_failure_logs_error_code_without_secrets(configured, http_stub, captured):
    http_stub.reply(text="bad key", status=401)
    with pytest.raises(TransportError):
        Completions().create(USER_HI)
    error = captured.events()[-1]
    assert error["event"] == "completion.error"  # nosec B101
    assert error["error_code"] == "auth"  # nosec B101
    assert all("sk-openai" not in m for m in captured.messages)  # nosec B101


def test_json_formatter_hoists_message_keys():
    record = logging.LogRecord("prism", logging.INFO, __file__, 1, json.dumps({"event": "e", "n": 1}), None, None)
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "e"  # nosec B101
    assert out["n"] == 1  # nosec B101


def test_configure_logger_file_handler(tmp_path):
    path = tmp_path / "logs" / "prism.log"
    logger = configure_logger(level="DEBUG", file_path=str(path))
    try:
        logger.info(json.dumps({"event": "file.test"}))
        for h in logger.handlers:
            h.flush()
        assert "file.test" in path.read_text(encoding="utf-8")  # nosec B101
    finally:
        configure_logger(level=logging.INFO, file_path=None)
