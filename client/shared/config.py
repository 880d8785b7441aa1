"""
Centralized configuration for the notes client core.

All settings are loaded from environment variables (prefixed with
``NOTES_CLIENT_``) with sensible defaults.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NOTES_CLIENT_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Notes Client"
    debug: bool = False
    log_level: str = "INFO"

    # Remote API
    api_base_url: str = "http://localhost:5000/api"
    request_timeout: float = 15.0  # seconds

    # Session bootstrap
    bootstrap_timeout_ms: int = 10_000

    # OTP resend throttling
    otp_cooldown_seconds: int = 30
    otp_tick_interval: float = 1.0  # seconds per countdown step

    # Navigation targets handed to the presentation layer
    login_path: str = "/login"
    dashboard_path: str = "/dashboard"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
