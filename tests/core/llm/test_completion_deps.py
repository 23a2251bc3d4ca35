from __future__ import annotations

import pytest
from pydantic import ValidationError

from endex.core.llm.deps import get_completion_client
from endex.core.settings import Settings, get_settings


def test_defaults_match_completion_endpoint(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("PERPLEXITY_API_KEY", "PERPLEXITY_BASE_URL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.perplexity_api_key == ""
    assert settings.perplexity_base_url == "https://api.perplexity.ai"
    assert settings.perplexity_model == "llama-3-sonar-small-32k-online"
    assert settings.perplexity_timeout_seconds == 10.0


def test_legacy_bearer_variable_is_accepted(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PERPLEXITY_API_KEY", raising=False)
    monkeypatch.setenv("Bearer", "legacy-key")

    assert Settings(_env_file=None).perplexity_api_key == "legacy-key"


def test_client_is_built_from_settings() -> None:
    client = get_completion_client()

    assert client.url == "https://completions.test/chat/completions"
    assert client.build_request("Acme").model == get_settings().perplexity_model


def test_empty_model_is_rejected_at_startup(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PERPLEXITY_MODEL", "")

    with pytest.raises(ValidationError):
        Settings(_env_file=None)
