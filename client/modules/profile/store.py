"""
Profile store.

Loads the signed-in user's name and email for the dashboard. A failed load
keeps whatever profile was shown before.
"""

import logging
from typing import Callable, Optional

from shared.exceptions import NotesClientError
from shared.notifications import NotificationBus
from shared.state import StateContainer

from .interfaces import IProfileApi
from .models import ProfileState, UserProfile

logger = logging.getLogger(__name__)

LOAD_FAILED = "Failed to load user info"


class ProfileStore:
    """Observable profile of the signed-in user."""

    def __init__(self, api: IProfileApi, notifications: NotificationBus):
        self._api = api
        self._notifications = notifications
        self._state: StateContainer[ProfileState] = StateContainer(ProfileState())

    def get(self) -> ProfileState:
        return self._state.get()

    def subscribe(self, callback: Callable[[ProfileState], None]) -> Callable[[], None]:
        return self._state.subscribe(callback)

    async def load(self) -> Optional[UserProfile]:
        """Fetch the current user; returns None on failure."""
        self._state.update(loading=True, error=None)
        try:
            profile = await self._api.get_current_user()
        except Exception as e:
            if isinstance(e, NotesClientError):
                logger.warning("Profile load failed: %s", e.code)
            else:
                logger.exception("Profile load raised unexpectedly")
            # The dashboard shows the generic text, not the server's reason.
            message = LOAD_FAILED
            self._state.update(loading=False, error=message)
            self._notifications.error("profile.load", message)
            return None

        self._state.update(profile=profile, loading=False)
        return profile
