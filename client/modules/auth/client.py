"""
HTTP implementation of the auth capability.
"""

from pydantic import ValidationError as PydanticValidationError

from shared.api_client import ApiClient, ApiResponse
from shared.exceptions import RemoteError

from .interfaces import IAuthApi
from .models import OtpRequest, PasswordCredentials, SignupRequest, TokenGrant

LOGIN_PATH = "/auth/login"
SEND_LOGIN_OTP_PATH = "/auth/send-otp-login"
VERIFY_LOGIN_OTP_PATH = "/auth/verify-otp-login"
SIGNUP_PATH = "/auth/signup"
VERIFY_SIGNUP_OTP_PATH = "/auth/verify-otp"
RESEND_SIGNUP_OTP_PATH = "/auth/resend-otp"


class HttpAuthApi(IAuthApi):
    """Auth calls through the shared ApiClient."""

    def __init__(self, api: ApiClient):
        self._api = api

    async def login(self, credentials: PasswordCredentials) -> ApiResponse:
        return await self._api.post(
            LOGIN_PATH,
            json={
                "email": credentials.email,
                "password": credentials.password,
                "keepSignedIn": credentials.keep_signed_in,
            },
        )

    async def send_login_otp(self, request: OtpRequest) -> None:
        await self._api.post(SEND_LOGIN_OTP_PATH, json=request.model_dump())

    async def verify_login_otp(self, email: str, code: str) -> TokenGrant:
        response = await self._api.post(VERIFY_LOGIN_OTP_PATH, json={"email": email, "otp": code})
        try:
            return TokenGrant.model_validate(response.data or {})
        except PydanticValidationError:
            raise RemoteError(
                "OTP login response did not carry an access token",
                status_code=response.status_code,
                code="INVALID_RESPONSE",
            )

    async def signup(self, request: SignupRequest) -> None:
        await self._api.post(SIGNUP_PATH, json=request.model_dump(mode="json", exclude_none=True))

    async def verify_signup_otp(self, email: str, code: str) -> None:
        await self._api.post(VERIFY_SIGNUP_OTP_PATH, json={"email": email, "otp": code})

    async def resend_signup_otp(self, request: OtpRequest) -> None:
        await self._api.post(RESEND_SIGNUP_OTP_PATH, json=request.model_dump())

    def set_access_token(self, token: str) -> None:
        self._api.set_access_token(token)

    def clear_access_token(self) -> None:
        self._api.clear_access_token()
