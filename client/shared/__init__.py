"""
Shared infrastructure for the notes client core.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Base exception classes
- api_client: HTTP transport to the remote API
- state: Observable snapshot container used by every store
- notifications: One-shot user-facing messages

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    NotesClientError,
    ValidationError,
    RemoteError,
    SessionTimeoutError,
    user_message,
)
from .api_client import ApiClient, ApiResponse
from .state import StateContainer
from .notifications import Notification, NotificationBus, NotificationLevel

__all__ = [
    "Settings",
    "get_settings",
    "NotesClientError",
    "ValidationError",
    "RemoteError",
    "SessionTimeoutError",
    "user_message",
    "ApiClient",
    "ApiResponse",
    "StateContainer",
    "Notification",
    "NotificationBus",
    "NotificationLevel",
]
