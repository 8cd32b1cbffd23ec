"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    catlog_pin: str | None = None
    reporting_timezone: str = "Asia/Tokyo"
    session_gap_minutes: int = 15
    calorie_average_window: int = 7
    weight_average_window: int = 7
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def normalize_pin(raw: str | None) -> str | None:
    """Return the configured PIN, or None when the API is left open."""
    if raw is None:
        return None
    cleaned = raw.strip()
    return cleaned or None
