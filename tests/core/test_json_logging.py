from __future__ import annotations

import json
import logging
import sys

from endex.core.logging import JsonFormatter


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="endex.completion",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Completion request failed",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_known_extra_fields() -> None:
    payload = json.loads(
        JsonFormatter().format(_record(error_kind="decode", upstream_status=200, duration_ms=1.5))
    )

    assert payload["logger"] == "endex.completion"
    assert payload["level"] == "INFO"
    assert payload["message"] == "Completion request failed"
    assert payload["error_kind"] == "decode"
    assert payload["upstream_status"] == 200
    assert payload["duration_ms"] == 1.5


def test_missing_and_unknown_extras_are_not_emitted() -> None:
    payload = json.loads(JsonFormatter().format(_record(subject="Acme")))

    assert "request_id" not in payload
    assert "subject" not in payload


def test_includes_exception_text() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()

    payload = json.loads(JsonFormatter().format(record))
    assert "RuntimeError: boom" in payload["exception"]
