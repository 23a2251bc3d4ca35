from __future__ import annotations

import time
from typing import cast

from fastapi import APIRouter, Request
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

metrics_router = APIRouter(tags=["metrics"])

# Labels are route templates and fixed outcome names only; never company names.

http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    labelnames=("method", "route", "status_code"),
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    labelnames=("method", "route", "status_code"),
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

completion_requests_total = Counter(
    "completion_requests_total",
    "Chat-completion exchanges by outcome",
    labelnames=("outcome",),
)

completion_request_duration_seconds = Histogram(
    "completion_request_duration_seconds",
    "Chat-completion exchange duration in seconds",
    labelnames=("outcome",),
    # Online models routinely take several seconds; the client times out at 10s by default.
    buckets=(0.25, 0.5, 1.0, 2.0, 3.0, 5.0, 7.5, 10.0, 15.0, 30.0),
)


def observe_completion(*, outcome: str, duration_seconds: float) -> None:
    completion_requests_total.labels(outcome=outcome).inc()
    completion_request_duration_seconds.labels(outcome=outcome).observe(duration_seconds)


def _route_label(request: Request) -> str:
    """Route template (e.g. /companies/info) or "unmatched" for 404s."""

    route = request.scope.get("route")
    path = getattr(route, "path", None)
    if isinstance(path, str) and path:
        return path
    return "unmatched"


class PrometheusMetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            route = _route_label(request)
            code = str(int(status_code))
            http_requests_total.labels(method=request.method, route=route, status_code=code).inc()
            http_request_duration_seconds.labels(
                method=request.method, route=route, status_code=code
            ).observe(time.perf_counter() - started)


@metrics_router.get("/metrics", include_in_schema=False)
def metrics() -> Response:
    payload = generate_latest()
    return Response(content=cast(bytes, payload), media_type=CONTENT_TYPE_LATEST)
