"""
Routing module.

Pure decision logic that gates guarded views on the session state.

Public API:
- decide: SessionState + RouteKind -> Decision
- watch: Re-evaluate a route on every SessionStore change
- RouteKind, Decision, DecisionKind: Models
"""

from .models import Decision, DecisionKind, RouteKind
from .guard import DASHBOARD_PATH, LOGIN_PATH, decide, watch

__all__ = [
    "Decision",
    "DecisionKind",
    "RouteKind",
    "DASHBOARD_PATH",
    "LOGIN_PATH",
    "decide",
    "watch",
]
