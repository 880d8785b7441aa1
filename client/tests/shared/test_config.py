"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        settings = Settings(_env_file=None)
        assert settings.app_name == "Notes Client"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.bootstrap_timeout_ms == 10_000
        assert settings.otp_cooldown_seconds == 30
        assert settings.otp_tick_interval == 1.0
        assert settings.login_path == "/login"
        assert settings.dashboard_path == "/dashboard"

    def test_loads_from_env(self):
        """Settings should load prefixed environment variables."""
        with patch.dict(os.environ, {
            "NOTES_CLIENT_DEBUG": "true",
            "NOTES_CLIENT_API_BASE_URL": "https://notes.example.com/api",
            "NOTES_CLIENT_BOOTSTRAP_TIMEOUT_MS": "2500",
        }):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.api_base_url == "https://notes.example.com/api"
            assert settings.bootstrap_timeout_ms == 2500

    def test_ignores_unprefixed_env(self):
        """Unprefixed variables should not leak into settings."""
        with patch.dict(os.environ, {"DEBUG": "true"}):
            settings = Settings(_env_file=None)
            assert settings.debug is False


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_caches(self):
        """get_settings should return cached instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
