"""Application configuration."""

import os
from dataclasses import dataclass
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

AIProvider = Literal["openrouter", "perplexity"]


@dataclass(frozen=True)
class ProviderConfig:
    """Connection details for the active AI provider."""

    provider: AIProvider
    api_key: str
    model: str
    base_url: str


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    ai_provider: AIProvider = "perplexity"
    openrouter_api_key: str | None = None
    openrouter_model: str = "deepseek/deepseek-chat-v3-0324:free"
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    perplexity_api_key: str | None = None
    perplexity_model: str = "sonar-pro"
    perplexity_base_url: str = "https://api.perplexity.ai"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    admin_token: str
    debug: bool = False
    request_min_delay_seconds: float = 0.5
    request_timeout_seconds: float = 30
    cache_ttl_days: int = 7
    cached_result_delay_seconds: float = 0.35
    retry_max_attempts: int = 2
    retry_base_delay_seconds: float = 1.0
    debounce_seconds: float = 1.5
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    def provider_config(self) -> ProviderConfig:
        """Return connection details for the configured provider."""
        if self.ai_provider == "openrouter":
            api_key = self.openrouter_api_key
            model = self.openrouter_model
            base_url = self.openrouter_base_url
        else:
            api_key = self.perplexity_api_key
            model = self.perplexity_model
            base_url = self.perplexity_base_url
        if not api_key:
            raise ValueError(f"Missing API key for provider: {self.ai_provider}")
        return ProviderConfig(
            provider=self.ai_provider,
            api_key=api_key,
            model=model,
            base_url=base_url,
        )

    def uses_supabase(self) -> bool:
        """Return True when a Supabase project is configured for storage."""
        return bool(self.supabase_url and self.supabase_service_key)
