"""
HTTP implementation of the session capability.
"""

from pydantic import ValidationError as PydanticValidationError

from shared.api_client import ApiClient
from shared.exceptions import RemoteError

from .interfaces import ISessionApi
from .models import SessionGrant

REFRESH_PATH = "/auth/refresh"


class HttpSessionApi(ISessionApi):
    """Refreshes the session through the shared ApiClient."""

    def __init__(self, api: ApiClient):
        self._api = api

    async def refresh_session(self) -> SessionGrant:
        response = await self._api.post(REFRESH_PATH)
        try:
            return SessionGrant.model_validate(response.data or {})
        except PydanticValidationError as e:
            raise RemoteError(
                "Refresh response did not carry an access token",
                status_code=response.status_code,
                code="INVALID_RESPONSE",
                details={"errors": e.errors(include_url=False)},
            )

    def set_access_token(self, token: str) -> None:
        self._api.set_access_token(token)
