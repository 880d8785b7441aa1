"""
Profile module.

Name and email of the signed-in user, shown next to the notes.

Public API:
- ProfileStore: Observable profile with load()
- IProfileApi / HttpProfileApi: Remote capability
- UserProfile, ProfileState: Models
"""

from .interfaces import IProfileApi
from .models import ProfileState, UserProfile
from .store import ProfileStore
from .client import HttpProfileApi

__all__ = [
    "IProfileApi",
    "ProfileState",
    "UserProfile",
    "ProfileStore",
    "HttpProfileApi",
]
