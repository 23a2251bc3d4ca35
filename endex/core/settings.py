from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "endex"
    app_env: str = Field(
        default="production",
        validation_alias=AliasChoices("APP_ENV", "app_env"),
        description="Runtime environment: development|production.",
    )

    # Completion endpoint (Perplexity chat completions)
    # The key is a bearer credential: never log it, never echo it back in errors.
    perplexity_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("PERPLEXITY_API_KEY", "Bearer", "perplexity_api_key"),
        description=(
            "Bearer credential for the completion endpoint. When unset an empty credential "
            "is sent and the upstream rejection surfaces as a transport error."
        ),
    )
    perplexity_base_url: str = Field(
        default="https://api.perplexity.ai",
        validation_alias=AliasChoices("PERPLEXITY_BASE_URL", "perplexity_base_url"),
        description="Base URL for the completion API (override for proxies/emulators).",
    )
    perplexity_model: str = Field(
        default="llama-3-sonar-small-32k-online",
        min_length=1,
        validation_alias=AliasChoices("PERPLEXITY_MODEL", "perplexity_model"),
        description="Model identifier sent with every company lookup.",
    )
    perplexity_timeout_seconds: float = Field(
        default=10.0,
        ge=1.0,
        validation_alias=AliasChoices(
            "PERPLEXITY_TIMEOUT_SECONDS", "perplexity_timeout_seconds"
        ),
        description="Timeout for a single completion request (seconds).",
    )

    company_name_max_chars: int = Field(
        default=200,
        ge=1,
        validation_alias=AliasChoices("COMPANY_NAME_MAX_CHARS", "company_name_max_chars"),
        description="Upper bound on the `name` query parameter accepted by the HTTP API.",
    )

    @property
    def is_development(self) -> bool:
        return str(self.app_env).strip().lower() == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
