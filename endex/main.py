from __future__ import annotations

from fastapi import FastAPI

from endex.api.exception_handlers import register_exception_handlers
from endex.api.schemas import HealthOut
from endex.companies.router import router as companies_router
from endex.core.logging import setup_logging
from endex.core.metrics import PrometheusMetricsMiddleware, metrics_router
from endex.core.middleware.http_logging import HttpLoggingMiddleware

setup_logging()


def create_app() -> FastAPI:
    app = FastAPI(
        title="Index by Endex",
        description=(
            "Company research lookups backed by a chat-completion endpoint.\n\n"
            "- Each lookup is a single upstream request; answers are never stored or cached.\n"
            "- Answers are returned as raw markdown plus newline-split paragraphs.\n"
            "- Logs and metrics carry metadata only, never search terms or answers."
        ),
        docs_url="/swagger",
        openapi_tags=[
            {
                "name": "health",
                "description": "Basic uptime check for load balancers and monitoring.",
            },
            {
                "name": "companies",
                "description": "Look up structured company details by name.",
            },
            {
                "name": "metrics",
                "description": "Prometheus-compatible metrics endpoint.",
            },
        ],
    )

    app.add_middleware(PrometheusMetricsMiddleware)
    app.add_middleware(HttpLoggingMiddleware)

    register_exception_handlers(app)

    @app.get(
        "/health",
        response_model=HealthOut,
        tags=["health"],
        summary="Health check",
        description=(
            "Verifies the API process is up. The completion endpoint is not contacted, "
            "so this never spends API credits."
        ),
    )
    async def health() -> HealthOut:
        return HealthOut(status="ok")

    app.include_router(metrics_router)
    app.include_router(companies_router)
    return app


app = create_app()
