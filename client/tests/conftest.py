"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
fast settings, a recording notification bus, and AsyncMock fakes for every
remote capability.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from shared.api_client import ApiResponse
from shared.config import Settings, get_settings
from shared.notifications import Notification, NotificationBus, NotificationLevel
from modules.auth.models import TokenGrant
from modules.notes.models import Note
from modules.profile.models import UserProfile
from modules.session.models import SessionGrant
from modules.session.store import SessionStore


class NotificationRecorder:
    """Collects every notification published on a bus."""

    def __init__(self) -> None:
        self.items: list[Notification] = []

    def __call__(self, notification: Notification) -> None:
        self.items.append(notification)

    @property
    def messages(self) -> list[str]:
        return [n.message for n in self.items]

    def of_level(self, level: NotificationLevel) -> list[Notification]:
        return [n for n in self.items if n.level is level]

    @property
    def errors(self) -> list[Notification]:
        return self.of_level(NotificationLevel.ERROR)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset the cached settings before and after each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings with short timers so timing tests run in milliseconds."""
    return Settings(
        _env_file=None,
        api_base_url="http://api.test",
        bootstrap_timeout_ms=50,
        otp_cooldown_seconds=3,
        otp_tick_interval=0.01,
    )


@pytest.fixture
def notifications() -> NotificationBus:
    return NotificationBus()


@pytest.fixture
def recorder(notifications: NotificationBus) -> NotificationRecorder:
    """Record everything published on the ``notifications`` bus."""
    rec = NotificationRecorder()
    notifications.subscribe(rec)
    return rec


@pytest.fixture
def session_store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def session_api() -> MagicMock:
    """Fake refresh capability that succeeds by default."""
    api = MagicMock()
    api.refresh_session = AsyncMock(
        return_value=SessionGrant(access_token="token-123", requires_profile_completion=False)
    )
    api.set_access_token = MagicMock()
    return api


@pytest.fixture
def auth_api() -> MagicMock:
    """Fake auth capability where every call succeeds by default."""
    api = MagicMock()
    api.login = AsyncMock(return_value=ApiResponse(status_code=200))
    api.send_login_otp = AsyncMock(return_value=None)
    api.verify_login_otp = AsyncMock(return_value=TokenGrant(access_token="otp-token"))
    api.signup = AsyncMock(return_value=None)
    api.verify_signup_otp = AsyncMock(return_value=None)
    api.resend_signup_otp = AsyncMock(return_value=None)
    api.clear_access_token = MagicMock()
    api.set_access_token = MagicMock()
    return api


@pytest.fixture
def notes_api() -> MagicMock:
    """Fake notes capability with an empty collection."""
    api = MagicMock()
    api.list_notes = AsyncMock(return_value=[])
    api.create_note = AsyncMock(side_effect=lambda content: Note(id="n1", content=content))
    api.update_note = AsyncMock(side_effect=lambda note_id, content: Note(id=note_id, content=content))
    api.delete_note = AsyncMock(return_value=None)
    return api


@pytest.fixture
def profile_api() -> MagicMock:
    api = MagicMock()
    api.get_current_user = AsyncMock(
        return_value=UserProfile(name="Test User", email="test@example.com")
    )
    return api
