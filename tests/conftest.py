from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PERPLEXITY_API_KEY", "test-key")
    monkeypatch.setenv("PERPLEXITY_BASE_URL", "https://completions.test")
    monkeypatch.delenv("Bearer", raising=False)
    # Settings are cached via @lru_cache; clear so env changes above take effect.
    from endex.core.settings import get_settings

    get_settings.cache_clear()


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from endex.main import create_app

    app = create_app()
    with TestClient(app) as c:
        yield c
