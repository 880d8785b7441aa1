"""
Route guard.

``decide`` maps a SessionState snapshot to admit / redirect / loading for a
guarded view. It is a pure function; ``watch`` re-runs it on every
SessionStore change and hands the decision to the presentation layer.

Redirect targets default to ``/login`` and ``/dashboard``; the container
passes the configured ``login_path`` / ``dashboard_path`` so the guard and
the auth flow navigate to the same places.
"""

from typing import Callable, Union

from modules.session.models import SessionState
from modules.session.store import SessionStore

from .models import Decision, RouteKind

LOGIN_PATH = "/login"
DASHBOARD_PATH = "/dashboard"


def decide(
    session: SessionState,
    route_kind: Union[RouteKind, str],
    *,
    login_path: str = LOGIN_PATH,
    dashboard_path: str = DASHBOARD_PATH,
) -> Decision:
    """
    Decide how to handle navigation to a guarded view.

    Args:
        session: Current session snapshot
        route_kind: "protected" or "completeProfile"
        login_path: Redirect target for unauthenticated users
        dashboard_path: Redirect target when no profile completion is pending

    Returns:
        LOADING while the startup refresh is in flight, otherwise ADMIT or a
        REDIRECT to the login or dashboard path.
    """
    route_kind = RouteKind(route_kind)

    if session.loading:
        return Decision.loading()

    if route_kind is RouteKind.PROTECTED:
        return Decision.admit() if session.is_authenticated else Decision.redirect(login_path)

    # RouteKind.COMPLETE_PROFILE
    if not session.is_authenticated:
        return Decision.redirect(login_path)
    if not session.requires_profile_completion:
        return Decision.redirect(dashboard_path)
    return Decision.admit()


def watch(
    store: SessionStore,
    route_kind: Union[RouteKind, str],
    on_decision: Callable[[Decision], None],
    *,
    login_path: str = LOGIN_PATH,
    dashboard_path: str = DASHBOARD_PATH,
) -> Callable[[], None]:
    """
    Evaluate ``decide`` now and after every SessionStore change.

    Returns:
        A callable that stops watching.
    """
    route_kind = RouteKind(route_kind)
    paths = {"login_path": login_path, "dashboard_path": dashboard_path}
    on_decision(decide(store.get(), route_kind, **paths))
    return store.subscribe(lambda state: on_decision(decide(state, route_kind, **paths)))
