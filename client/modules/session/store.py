"""
Session store.

Leaf state container for SessionState. It is injected into the
bootstrapper, the auth flow controller and the route guard watcher.
"""

from typing import Optional

from shared.state import StateContainer

from .models import SessionState


class SessionStore(StateContainer[SessionState]):
    """Holds the current SessionState; every setter replaces the snapshot."""

    def __init__(self, initial: Optional[SessionState] = None):
        super().__init__(initial or SessionState())

    def set_authenticated(self, value: bool) -> SessionState:
        return self.update(is_authenticated=value)

    def set_requires_profile_completion(self, value: bool) -> SessionState:
        return self.update(requires_profile_completion=value)

    def set_loading(self, value: bool) -> SessionState:
        return self.update(loading=value)
