"""
Session module data models.

SessionState is the snapshot consumed by the route guard and the
presentation layer; SessionGrant is what a successful refresh returns.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class SessionState(BaseModel):
    """
    Authentication status of the current user.

    ``loading`` starts as True and is cleared exactly once, when the startup
    refresh settles (success, failure or timeout).
    """

    is_authenticated: bool = Field(default=False, description="Whether the user is signed in")
    requires_profile_completion: bool = Field(
        default=False,
        description="Whether onboarding still has to collect profile data",
    )
    loading: bool = Field(default=True, description="Startup refresh still in flight")

    model_config = {"frozen": True}


class SessionGrant(BaseModel):
    """Successful refresh-session response."""

    access_token: str = Field(..., alias="accessToken", description="Opaque bearer token")
    requires_profile_completion: bool = Field(
        default=False,
        alias="requiresProfileCompletion",
        description="Defaults to False when the server omits it",
    )

    model_config = {"frozen": True, "populate_by_name": True, "extra": "ignore"}


class BootstrapStatus(str, Enum):
    """How the startup refresh settled."""

    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"
    TIMED_OUT = "timed_out"


class BootstrapResult(BaseModel):
    """Result contract for the session bootstrap."""

    status: BootstrapStatus
    requires_profile_completion: bool = False
    reason: Optional[str] = Field(None, description="Why the session is unauthenticated")

    model_config = {"frozen": True}
