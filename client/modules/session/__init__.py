"""
Session module.

Tracks whether the user is authenticated and settles that state at startup.

Public API:
- SessionStore: Observable SessionState container
- SessionBootstrapper: One-shot startup refresh with a deadline
- ISessionApi / HttpSessionApi: Remote refresh capability
- SessionState, SessionGrant, BootstrapResult, BootstrapStatus: Models
"""

from .interfaces import ISessionApi
from .models import BootstrapResult, BootstrapStatus, SessionGrant, SessionState
from .store import SessionStore
from .bootstrap import SessionBootstrapper
from .client import HttpSessionApi

__all__ = [
    # Interface
    "ISessionApi",
    # Models
    "SessionState",
    "SessionGrant",
    "BootstrapResult",
    "BootstrapStatus",
    # Implementations
    "SessionStore",
    "SessionBootstrapper",
    "HttpSessionApi",
]
