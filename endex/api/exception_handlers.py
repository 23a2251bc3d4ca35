from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from endex.core.llm.completion_client import CompletionDecodeError, CompletionError
from endex.domain.exceptions import BusinessValidationError

logger = logging.getLogger("endex.api")


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None) or request.headers.get("X-Request-ID")


def register_exception_handlers(app: FastAPI) -> None:
    """Register application exception handlers."""

    @app.exception_handler(BusinessValidationError)
    async def handle_business_validation_error(
        request: Request,
        exc: BusinessValidationError,
    ) -> JSONResponse:
        # The offending value is not logged: it is user search input.
        logger.info(
            "Business validation failed",
            extra={
                "request_id": _request_id(request),
                "http_method": request.method,
                "request_path": request.url.path,  # no query string
                "status_code": 400,
                "error_kind": "business_validation",
            },
        )
        return JSONResponse(status_code=400, content={"detail": exc.message})

    @app.exception_handler(CompletionError)
    async def handle_completion_error(request: Request, exc: CompletionError) -> JSONResponse:
        detail = (
            "Completion service returned an invalid response"
            if isinstance(exc, CompletionDecodeError)
            else "Completion service unavailable"
        )
        logger.info(
            "Company lookup failed",
            extra={
                "request_id": _request_id(request),
                "http_method": request.method,
                "request_path": request.url.path,
                "status_code": 502,
                "error_kind": exc.kind,
                "upstream_status": getattr(exc, "status_code", None),
            },
        )
        return JSONResponse(status_code=502, content={"detail": detail})
