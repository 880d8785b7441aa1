"""
Profile module interface.
"""

from typing import Protocol, runtime_checkable

from .models import UserProfile


@runtime_checkable
class IProfileApi(Protocol):
    """Remote capability for the signed-in user's profile."""

    async def get_current_user(self) -> UserProfile:
        """
        Fetch the signed-in user.

        Raises:
            RemoteError: On a non-2xx response or transport failure
        """
        ...
