"""
One-shot user-facing notifications.

Operations publish success/info/error messages here; the presentation layer
subscribes and decides how to show them (toasts, banners, ...).
"""

import logging
from enum import Enum
from typing import Callable

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class NotificationLevel(str, Enum):
    """Severity of a notification."""

    SUCCESS = "success"
    INFO = "info"
    ERROR = "error"


class Notification(BaseModel):
    """A single message emitted by a core operation."""

    level: NotificationLevel = Field(..., description="Severity")
    message: str = Field(..., description="Human-readable text")
    operation: str = Field(..., description="Operation that emitted it")

    model_config = {"frozen": True}


NotificationHandler = Callable[[Notification], None]


class NotificationBus:
    """Fan-out of notifications to registered handlers."""

    def __init__(self) -> None:
        self._handlers: list[NotificationHandler] = []

    def subscribe(self, handler: NotificationHandler) -> Callable[[], None]:
        """Register a handler; returns a callable that removes it."""
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def publish(self, notification: Notification) -> None:
        """Deliver a notification to every handler."""
        logger.debug(
            "notification %s from %s: %s",
            notification.level.value,
            notification.operation,
            notification.message,
        )
        for handler in list(self._handlers):
            try:
                handler(notification)
            except Exception:
                logger.exception("Notification handler %r failed", handler)

    def success(self, operation: str, message: str) -> None:
        self.publish(Notification(level=NotificationLevel.SUCCESS, message=message, operation=operation))

    def info(self, operation: str, message: str) -> None:
        self.publish(Notification(level=NotificationLevel.INFO, message=message, operation=operation))

    def error(self, operation: str, message: str) -> None:
        self.publish(Notification(level=NotificationLevel.ERROR, message=message, operation=operation))
