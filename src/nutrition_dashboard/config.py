"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    n8n_onboarding_webhook_url: str | None = None
    webhook_timeout_seconds: float = 10.0
    cors_allow_origin: str = "*"
    cors_allow_methods: str = "GET, POST, PUT, DELETE, OPTIONS"
    cors_allow_headers: str = "Content-Type, Authorization"
    cors_max_age: int = 86400
    dashboard_history_limit: int = 30
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def normalize_webhook_url(raw: str | None) -> str | None:
    """Return the webhook URL, treating blank values as unset."""
    if raw is None:
        return None
    cleaned = raw.strip()
    return cleaned or None
