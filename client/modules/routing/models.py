"""
Route guard data models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class RouteKind(str, Enum):
    """Kinds of guarded views."""

    PROTECTED = "protected"
    COMPLETE_PROFILE = "completeProfile"

    @classmethod
    def _missing_(cls, value):
        # Also accept the snake_case spelling used by Python callers.
        if value == "complete_profile":
            return cls.COMPLETE_PROFILE
        return None


class DecisionKind(str, Enum):
    """What the presentation layer should do with a guarded view."""

    ADMIT = "admit"
    REDIRECT = "redirect"
    LOADING = "loading"


class Decision(BaseModel):
    """Outcome of a route guard evaluation."""

    kind: DecisionKind
    path: Optional[str] = Field(None, description="Redirect target, only for REDIRECT")

    model_config = {"frozen": True}

    @classmethod
    def admit(cls) -> "Decision":
        return cls(kind=DecisionKind.ADMIT)

    @classmethod
    def loading(cls) -> "Decision":
        return cls(kind=DecisionKind.LOADING)

    @classmethod
    def redirect(cls, path: str) -> "Decision":
        return cls(kind=DecisionKind.REDIRECT, path=path)
