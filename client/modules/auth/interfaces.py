"""
Authentication module interface.

The AuthFlowController depends on IAuthApi, not on the HTTP client. This
keeps the state machine testable with AsyncMock fakes.
"""

from typing import Protocol, runtime_checkable

from shared.api_client import ApiResponse

from .models import OtpRequest, PasswordCredentials, SignupRequest, TokenGrant


@runtime_checkable
class IAuthApi(Protocol):
    """
    Remote auth capability.

    Every method raises RemoteError on a non-2xx response or a transport
    failure; the error carries the server's ``message`` when there is one.
    """

    async def login(self, credentials: PasswordCredentials) -> ApiResponse:
        """
        Password login.

        Returns:
            The raw response; the caller treats only 200/204 as success.
        """
        ...

    async def send_login_otp(self, request: OtpRequest) -> None:
        """Ask the server to email a login code."""
        ...

    async def verify_login_otp(self, email: str, code: str) -> TokenGrant:
        """
        Exchange a login code for an access token.

        Returns:
            TokenGrant with the access token
        """
        ...

    async def signup(self, request: SignupRequest) -> None:
        """Create the account and dispatch a confirmation code in one call."""
        ...

    async def verify_signup_otp(self, email: str, code: str) -> None:
        """Finalize account creation with the emailed code."""
        ...

    async def resend_signup_otp(self, request: OtpRequest) -> None:
        """Send a fresh signup confirmation code."""
        ...

    def set_access_token(self, token: str) -> None:
        """Hand the access token to the transport for subsequent calls."""
        ...

    def clear_access_token(self) -> None:
        """Stop sending the access token (the user is signed out)."""
        ...
