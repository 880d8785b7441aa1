"""
Authentication module data models.

Credentials are a method-tagged union (password or one-time code) that is
validated right before submission and never persisted. The controller keeps
a single CredentialsDraft so both login branches read the same email.
"""

from datetime import date, datetime
from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, EmailStr, Field, field_validator


class LoginMethod(str, Enum):
    """Login branches offered by the sign-in form."""

    PASSWORD = "password"
    OTP = "otp"


class PasswordCredentials(BaseModel):
    """Email + password login."""

    method: Literal["password"] = "password"
    email: EmailStr
    password: str = Field(..., min_length=6, repr=False)
    keep_signed_in: bool = True


class OtpCredentials(BaseModel):
    """Email + one-time code login (or signup confirmation)."""

    method: Literal["otp"] = "otp"
    email: EmailStr
    code: str = Field(..., pattern=r"^\d{6}$", repr=False)


Credentials = Annotated[
    Union[PasswordCredentials, OtpCredentials],
    Field(discriminator="method"),
]


class OtpRequest(BaseModel):
    """Body of a send/resend code request."""

    email: EmailStr


class SignupRequest(BaseModel):
    """Account creation request; the server dispatches a code on success."""

    name: str = Field(..., min_length=2)
    email: EmailStr
    password: str = Field(..., min_length=6, repr=False)
    dob: Optional[date] = Field(None, description="Date of birth, sent as YYYY-MM-DD")

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 2:
            raise ValueError("Name is too short")
        return value

    @field_validator("dob")
    @classmethod
    def dob_not_in_future(cls, value: Optional[date]) -> Optional[date]:
        if value is not None and value > date.today():
            raise ValueError("Date of birth cannot be in the future")
        return value


class CredentialsDraft(BaseModel):
    """
    Form input shared by the password and OTP branches.

    Switching methods keeps the email, so the user does not retype it.
    """

    method: LoginMethod = LoginMethod.PASSWORD
    email: str = ""
    password: str = Field(default="", repr=False)
    code: str = Field(default="", repr=False)

    model_config = {"frozen": True}


class OtpRequestWindow(BaseModel):
    """Cooldown bookkeeping for the code currently in flight."""

    email: str
    issued_at: datetime
    cooldown_remaining: int = Field(..., ge=0, description="Whole seconds until a resend is allowed")

    model_config = {"frozen": True}


class TokenGrant(BaseModel):
    """Successful OTP login response."""

    access_token: str = Field(..., alias="accessToken")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}


class AuthStatus(str, Enum):
    """States of the login/signup state machine."""

    IDLE = "idle"
    AWAITING_CREDENTIALS = "awaiting_credentials"
    OTP_SENT = "otp_sent"
    AUTHENTICATED = "authenticated"
    FAILED = "failed"


class AuthFlowState(BaseModel):
    """Snapshot of the auth flow, observed by the sign-in and signup forms."""

    status: AuthStatus = AuthStatus.IDLE
    draft: CredentialsDraft = Field(default_factory=CredentialsDraft)
    otp_issued: bool = Field(default=False, description="A login code was sent")
    signup_otp_sent: bool = Field(default=False, description="A signup code was sent")
    cooldown_remaining: int = 0
    error: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def method(self) -> LoginMethod:
        return self.draft.method


class AuthOutcome(BaseModel):
    """Result of one auth operation, returned instead of raising."""

    ok: bool
    message: Optional[str] = None
    navigate_to: Optional[str] = None
    throttled: bool = Field(default=False, description="Skipped locally by the cooldown")

    model_config = {"frozen": True}
