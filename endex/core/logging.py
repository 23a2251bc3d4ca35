"""Centralized logging configuration.

Logs are JSON lines on stdout so they can be shipped as-is by the container runtime.
- Search terms, prompts and completion text are never logged; only metadata is.
- The bearer credential never appears in a log record.
- `extra` fields are optional; the formatter tolerates records that lack them.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
from datetime import UTC, datetime
from typing import Any


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Optional structured fields copied from `extra=` when present on a record.
_EXTRA_FIELDS = (
    "request_id",
    "http_method",
    "request_path",
    "status_code",
    "duration_ms",
    "error_kind",
    "upstream_status",
    "model",
)


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON object.

    Third-party loggers (uvicorn, httpx) emit records without our extra fields, so
    every field is looked up with a default instead of `%(name)s`-style interpolation.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for field in _EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


def setup_logging(stream: str = "ext://sys.stdout") -> None:
    """Configure application logging (JSON lines to `stream`, stdout by default)."""

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": "endex.core.logging.JsonFormatter",
                }
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "json",
                    "stream": stream,
                }
            },
            "loggers": {
                # httpx logs full request URLs at INFO; keep it quiet unless debugging.
                "httpx": {"level": "WARNING"},
            },
            "root": {
                "level": LOG_LEVEL,
                "handlers": ["default"],
            },
        }
    )
