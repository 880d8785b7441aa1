"""
HTTP transport for the remote notes API.

Wraps ``httpx.AsyncClient`` and turns every non-success outcome into a
``RemoteError``. The client keeps a cookie jar (the ambient session
credential used by the refresh call) and an optional bearer access token
that the session layer hands over after a refresh or OTP login.
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import BaseModel, Field

from .config import Settings, get_settings
from .exceptions import RemoteError

logger = logging.getLogger(__name__)


class ApiResponse(BaseModel):
    """Decoded response from the remote API."""

    status_code: int = Field(..., description="HTTP status code")
    data: Any = Field(None, description="Decoded JSON body, if any")

    model_config = {"frozen": True}


def _extract_message(response: httpx.Response) -> Optional[str]:
    """Pull the ``message`` field out of an error body, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None


class ApiClient:
    """
    JSON-over-HTTP client for the notes backend.

    Pass ``http_client`` to inject a preconfigured ``httpx.AsyncClient``
    (tests use one built on ``httpx.MockTransport``).
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self._settings = settings or get_settings()
        self._client = http_client or httpx.AsyncClient(
            base_url=self._settings.api_base_url,
            timeout=self._settings.request_timeout,
            headers={"Content-Type": "application/json"},
        )
        self._access_token: Optional[str] = None

    @property
    def access_token(self) -> Optional[str]:
        """Bearer token sent with every request, if one was handed over."""
        return self._access_token

    def set_access_token(self, token: Optional[str]) -> None:
        self._access_token = token or None

    def clear_access_token(self) -> None:
        self._access_token = None

    async def request(
        self,
        method: str,
        path: str,
        json: Optional[Any] = None,
    ) -> ApiResponse:
        """
        Issue one request and decode its JSON body.

        Args:
            method: HTTP method
            path: Path relative to the API base URL
            json: Optional JSON request body

        Returns:
            ApiResponse for any 2xx status

        Raises:
            RemoteError: On a non-2xx status or a transport failure
        """
        headers = {}
        if self._access_token:
            headers["Authorization"] = f"Bearer {self._access_token}"

        try:
            response = await self._client.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise RemoteError(f"{method} {path} failed: {e}", code="TRANSPORT_ERROR")

        if not response.is_success:
            server_message = _extract_message(response)
            logger.info("%s %s returned %s", method, path, response.status_code)
            raise RemoteError(
                server_message or f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                server_message=server_message,
                code="REMOTE_ERROR",
            )

        data = None
        if response.content:
            try:
                data = response.json()
            except ValueError:
                raise RemoteError(
                    f"{method} {path} returned a non-JSON body",
                    status_code=response.status_code,
                    code="INVALID_RESPONSE",
                )

        return ApiResponse(status_code=response.status_code, data=data)

    async def get(self, path: str) -> ApiResponse:
        return await self.request("GET", path)

    async def post(self, path: str, json: Optional[Any] = None) -> ApiResponse:
        return await self.request("POST", path, json=json)

    async def patch(self, path: str, json: Optional[Any] = None) -> ApiResponse:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> ApiResponse:
        return await self.request("DELETE", path)

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
