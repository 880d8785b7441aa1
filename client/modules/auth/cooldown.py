"""
OTP resend cooldown.

After every successful send the window is reset to a fixed number of
seconds and counted down once per tick by an asyncio task. The task ends on
its own at zero; starting a new window cancels and replaces the old one.
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from .models import OtpRequestWindow

logger = logging.getLogger(__name__)


class OtpCooldown:
    """
    Countdown that suppresses repeat code requests.

    Args:
        window_seconds: Length of the window after each send
        tick_interval: Seconds per countdown step (1.0 in production)
        on_change: Called with the remaining seconds whenever they change
    """

    def __init__(
        self,
        window_seconds: int = 30,
        tick_interval: float = 1.0,
        on_change: Optional[Callable[[int], None]] = None,
    ):
        self._window_seconds = window_seconds
        self._tick_interval = tick_interval
        self._listeners: list[Callable[[int], None]] = [on_change] if on_change else []
        self._window: Optional[OtpRequestWindow] = None
        self._task: Optional[asyncio.Task] = None
        self._expired = asyncio.Event()
        self._expired.set()

    def listen(self, callback: Callable[[int], None]) -> None:
        """Also call ``callback`` with the remaining seconds on every change."""
        self._listeners.append(callback)

    @property
    def window_seconds(self) -> int:
        return self._window_seconds

    @property
    def window(self) -> Optional[OtpRequestWindow]:
        """The window of the code currently in flight, if any."""
        return self._window

    @property
    def remaining(self) -> int:
        return self._window.cooldown_remaining if self._window else 0

    @property
    def active(self) -> bool:
        return self.remaining > 0

    def start(self, email: str) -> OtpRequestWindow:
        """Reset the window for a freshly sent code and start counting down."""
        self._cancel_task()
        self._window = OtpRequestWindow(
            email=email,
            issued_at=datetime.now(timezone.utc),
            cooldown_remaining=self._window_seconds,
        )
        self._changed()
        if self._window_seconds > 0:
            self._expired.clear()
            self._task = asyncio.get_running_loop().create_task(self._countdown())
        else:
            self._expired.set()
        return self._window

    def cancel(self) -> None:
        """Stop counting and drop the window."""
        self._cancel_task()
        had_window = self._window is not None and self._window.cooldown_remaining > 0
        self._window = None
        self._expired.set()
        if had_window:
            self._changed()

    async def wait_expired(self) -> None:
        """Wait until the remaining time reaches zero (or the window is cancelled)."""
        await self._expired.wait()

    async def _countdown(self) -> None:
        while self._window is not None and self._window.cooldown_remaining > 0:
            await asyncio.sleep(self._tick_interval)
            if self._window is None:
                break
            self._window = self._window.model_copy(
                update={"cooldown_remaining": self._window.cooldown_remaining - 1}
            )
            self._changed()
        logger.debug("OTP cooldown elapsed")
        self._expired.set()

    def _cancel_task(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    def _changed(self) -> None:
        remaining = self.remaining
        for listener in list(self._listeners):
            listener(remaining)
