from __future__ import annotations

from endex.core.llm.completion_client import CompletionClient, CompletionConfig
from endex.core.settings import get_settings


def get_completion_client() -> CompletionClient:
    """
    Dependency provider for CompletionClient.

    A missing API key is not an error here: the request goes out with an empty
    bearer credential and the upstream rejection surfaces as a transport error.
    """

    settings = get_settings()
    config = CompletionConfig(
        api_key=settings.perplexity_api_key,
        base_url=settings.perplexity_base_url,
        model=settings.perplexity_model,
        timeout_seconds=float(settings.perplexity_timeout_seconds),
    )
    return CompletionClient(config=config)
