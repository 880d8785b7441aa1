"""
Profile module data models.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserProfile(BaseModel):
    """The signed-in user as returned by ``GET /auth/me``."""

    name: str = Field(default="", description="Display name")
    email: str = Field(default="", description="Account email")

    model_config = {"frozen": True, "extra": "ignore"}


class ProfileState(BaseModel):
    """Snapshot of the profile shown on the dashboard header."""

    profile: Optional[UserProfile] = None
    loading: bool = False
    error: Optional[str] = None

    model_config = {"frozen": True}

    @property
    def display_name(self) -> str:
        return self.profile.name if self.profile and self.profile.name else "User"
