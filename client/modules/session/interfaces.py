"""
Session module interface.

The bootstrapper depends on ISessionApi, not on the HTTP client, so it can
be exercised with a fake that stalls, fails or answers late.
"""

from typing import Protocol, runtime_checkable

from .models import SessionGrant


@runtime_checkable
class ISessionApi(Protocol):
    """Remote capability behind the startup session refresh."""

    async def refresh_session(self) -> SessionGrant:
        """
        Exchange the ambient session credential for a fresh access token.

        Returns:
            SessionGrant with the access token and onboarding flag

        Raises:
            RemoteError: On a non-2xx response or transport failure
        """
        ...

    def set_access_token(self, token: str) -> None:
        """Hand the access token to the transport for subsequent calls."""
        ...
