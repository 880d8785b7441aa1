"""
HTTP implementation of the profile capability.
"""

from pydantic import ValidationError as PydanticValidationError

from shared.api_client import ApiClient
from shared.exceptions import RemoteError

from .interfaces import IProfileApi
from .models import UserProfile

ME_PATH = "/auth/me"


class HttpProfileApi(IProfileApi):
    """Reads the current user through the shared ApiClient."""

    def __init__(self, api: ApiClient):
        self._api = api

    async def get_current_user(self) -> UserProfile:
        response = await self._api.get(ME_PATH)
        try:
            return UserProfile.model_validate(response.data or {})
        except PydanticValidationError:
            raise RemoteError(
                "Current user response was not a profile",
                status_code=response.status_code,
                code="INVALID_RESPONSE",
            )
