"""Access logging middleware.

- One record per request, metadata only: no bodies, no query strings, no headers.
  The query string carries the searched company name.
- X-Request-ID is propagated when it looks safe, generated otherwise.
"""

from __future__ import annotations

import logging
import re
import time
import uuid

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

logger = logging.getLogger("endex.http")

_REQUEST_ID_HEADER = "X-Request-ID"
_SAFE_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]{0,127}$")


def _request_id_for(request: Request) -> str:
    """Caller-supplied id when it matches a narrow charset, else a new UUID4 hex."""

    candidate = request.headers.get(_REQUEST_ID_HEADER)
    if candidate and _SAFE_REQUEST_ID_PATTERN.fullmatch(candidate):
        return candidate
    return uuid.uuid4().hex


def _route_path(request: Request) -> str:
    route = request.scope.get("route")
    path = getattr(route, "path", None)
    if isinstance(path, str) and path:
        return path
    return "unmatched"


class HttpLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = _request_id_for(request)
        request.state.request_id = request_id
        started = time.perf_counter()

        def fields(status_code: int) -> dict[str, object]:
            return {
                "request_id": request_id,
                "http_method": request.method,
                "request_path": _route_path(request),
                "status_code": status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
            }

        try:
            response = await call_next(request)
        except Exception:  # noqa: BLE001 - logged with stack trace, then re-raised
            logger.exception("Unhandled exception while processing request", extra=fields(500))
            raise

        response.headers[_REQUEST_ID_HEADER] = request_id
        logger.info("Request completed", extra=fields(response.status_code))
        return response
