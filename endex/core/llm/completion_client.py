from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import httpx
from pydantic import ValidationError

from endex.companies.prompt import SYSTEM_PROMPT, render_company_prompt
from endex.core.llm.cancellation import CancellationToken
from endex.core.llm.schemas import CompletionRequest, CompletionResponse
from endex.core.metrics import observe_completion

logger = logging.getLogger("endex.completion")


class CompletionError(Exception):
    """Base error for a failed company lookup (safe to map to 502)."""

    kind = "error"


class CompletionTransportError(CompletionError):
    """No usable response: connection failure, timeout, empty body or non-2xx status."""

    kind = "transport"

    def __init__(self, message: str, *, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class CompletionDecodeError(CompletionError):
    """A body arrived but is not a completion with at least one choice."""

    kind = "decode"


class CompletionCancelledError(CompletionError):
    """The caller invalidated the request before its result was delivered."""

    kind = "cancelled"


@dataclass(frozen=True)
class CompletionConfig:
    api_key: str
    base_url: str
    model: str
    timeout_seconds: float


class CompletionClient:
    """
    One request/response exchange with a chat-completion endpoint per call.

    - No retries, no caching, no streaming; the full body is awaited.
    - A fresh HTTP connection per call; nothing is kept between lookups.
    - Logs outcome metadata only (never the key, the prompt or the answer).
    """

    def __init__(
        self, *, config: CompletionConfig, transport: httpx.AsyncBaseTransport | None = None
    ):
        self._config = config
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self._config.base_url.rstrip('/')}/chat/completions"

    def build_request(self, subject: str) -> CompletionRequest:
        return CompletionRequest.for_prompt(
            model=self._config.model,
            system_prompt=SYSTEM_PROMPT,
            user_prompt=render_company_prompt(subject),
        )

    async def fetch_company_info(
        self, subject: str, *, cancel: CancellationToken | None = None
    ) -> str:
        """
        Ask the completion endpoint about `subject` and return the first choice's content.

        Raises CompletionTransportError, CompletionDecodeError, or CompletionCancelledError
        when `cancel` was invalidated before the result could be delivered.
        """

        if cancel is not None and cancel.cancelled:
            raise CompletionCancelledError("Lookup cancelled before it was sent")

        request = self.build_request(subject)
        started = time.perf_counter()
        try:
            content = await self._exchange(request)
        except CompletionError as exc:
            self._record(outcome=exc.kind, started=started, exc=exc)
            if cancel is not None and cancel.cancelled:
                raise CompletionCancelledError("Lookup superseded before delivery") from exc
            raise

        self._record(outcome="success", started=started)
        if cancel is not None and cancel.cancelled:
            raise CompletionCancelledError("Lookup superseded before delivery")
        return content

    async def _exchange(self, request: CompletionRequest) -> str:
        headers = {
            "accept": "application/json",
            "content-type": "application/json",
            "authorization": f"Bearer {self._config.api_key}",
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout_seconds, transport=self._transport
            ) as client:
                resp = await client.post(
                    self.url, headers=headers, content=request.model_dump_json()
                )
        except httpx.TimeoutException as exc:
            raise CompletionTransportError("Completion request timed out") from exc
        except httpx.HTTPError as exc:
            raise CompletionTransportError("Completion request failed") from exc

        if not resp.is_success:
            # Error bodies are not decoded even when they look like a completion.
            raise CompletionTransportError(
                "Completion service returned an error", status_code=resp.status_code
            )
        if not resp.content:
            raise CompletionTransportError(
                "Completion service returned no body", status_code=resp.status_code
            )

        try:
            decoded = CompletionResponse.model_validate_json(resp.content)
        except ValidationError as exc:
            raise CompletionDecodeError("Completion response could not be decoded") from exc

        return decoded.first_content()

    def _record(self, *, outcome: str, started: float, exc: CompletionError | None = None) -> None:
        duration = time.perf_counter() - started
        observe_completion(outcome=outcome, duration_seconds=duration)
        logger.info(
            "Completion request finished" if exc is None else "Completion request failed",
            extra={
                "model": self._config.model,
                "error_kind": None if exc is None else exc.kind,
                "upstream_status": getattr(exc, "status_code", None),
                "duration_ms": round(duration * 1000.0, 2),
            },
        )
