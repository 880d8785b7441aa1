"""
Dependency wiring for the notes client core.

This module provides the "container" that wires together all module
implementations. Stores are plain objects handed to the components that
need them by reference; nothing here is a module-level singleton, so tests
can build any component on its own with fakes.
"""

import asyncio
from typing import TYPE_CHECKING, Callable, Optional, Union

import httpx

from shared.config import Settings, get_settings
from shared.api_client import ApiClient
from shared.log_config import setup_logging
from shared.notifications import NotificationBus
from modules.routing import Decision, RouteKind, decide, watch
from modules.session.models import BootstrapResult
from modules.session.store import SessionStore

# Type checking imports for interfaces (avoids import cycles at startup)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthApi
    from modules.auth.service import AuthFlowController
    from modules.notes.interfaces import INotesApi
    from modules.notes.store import NotesStore
    from modules.profile.interfaces import IProfileApi
    from modules.profile.store import ProfileStore
    from modules.session.bootstrap import SessionBootstrapper
    from modules.session.interfaces import ISessionApi


class ClientContainer:
    """
    Container for all component instances.

    Components are created lazily on first access and cached for the
    container's lifetime. Pass ``http_client`` to run everything over a
    preconfigured ``httpx.AsyncClient`` (e.g. one using MockTransport).
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._http_client = http_client
        self._api_client: Optional[ApiClient] = None
        self._notifications: Optional[NotificationBus] = None
        self._session: Optional[SessionStore] = None
        self._session_api: "ISessionApi | None" = None
        self._bootstrapper: "SessionBootstrapper | None" = None
        self._auth_api: "IAuthApi | None" = None
        self._auth: "AuthFlowController | None" = None
        self._notes_api: "INotesApi | None" = None
        self._notes: "NotesStore | None" = None
        self._profile_api: "IProfileApi | None" = None
        self._profile: "ProfileStore | None" = None

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def api_client(self) -> ApiClient:
        """Get the shared HTTP transport."""
        if self._api_client is None:
            self._api_client = ApiClient(self._settings, http_client=self._http_client)
        return self._api_client

    @property
    def notifications(self) -> NotificationBus:
        """Get the notification bus the presentation layer subscribes to."""
        if self._notifications is None:
            self._notifications = NotificationBus()
        return self._notifications

    @property
    def session(self) -> SessionStore:
        """Get the session store."""
        if self._session is None:
            self._session = SessionStore()
        return self._session

    @property
    def session_api(self) -> "ISessionApi":
        if self._session_api is None:
            from modules.session.client import HttpSessionApi
            self._session_api = HttpSessionApi(self.api_client)
        return self._session_api

    @property
    def bootstrapper(self) -> "SessionBootstrapper":
        """Get the startup session bootstrapper."""
        if self._bootstrapper is None:
            from modules.session.bootstrap import SessionBootstrapper
            self._bootstrapper = SessionBootstrapper(
                self.session_api,
                self.session,
                settings=self._settings,
            )
        return self._bootstrapper

    @property
    def auth_api(self) -> "IAuthApi":
        if self._auth_api is None:
            from modules.auth.client import HttpAuthApi
            self._auth_api = HttpAuthApi(self.api_client)
        return self._auth_api

    @property
    def auth(self) -> "AuthFlowController":
        """Get the login/signup flow controller."""
        if self._auth is None:
            from modules.auth.service import AuthFlowController
            self._auth = AuthFlowController(
                self.auth_api,
                self.session,
                self.notifications,
                settings=self._settings,
            )
        return self._auth

    @property
    def notes_api(self) -> "INotesApi":
        if self._notes_api is None:
            from modules.notes.client import HttpNotesApi
            self._notes_api = HttpNotesApi(self.api_client)
        return self._notes_api

    @property
    def notes(self) -> "NotesStore":
        """Get the notes store."""
        if self._notes is None:
            from modules.notes.store import NotesStore
            self._notes = NotesStore(self.notes_api, self.notifications)
        return self._notes

    @property
    def profile_api(self) -> "IProfileApi":
        if self._profile_api is None:
            from modules.profile.client import HttpProfileApi
            self._profile_api = HttpProfileApi(self.api_client)
        return self._profile_api

    @property
    def profile(self) -> "ProfileStore":
        """Get the current-user profile store."""
        if self._profile is None:
            from modules.profile.store import ProfileStore
            self._profile = ProfileStore(self.profile_api, self.notifications)
        return self._profile

    def guard(self, route_kind: Union[RouteKind, str]) -> Decision:
        """Evaluate the route guard against the current session."""
        return decide(self.session.get(), route_kind, **self._route_paths())

    def watch_route(
        self,
        route_kind: Union[RouteKind, str],
        on_decision: Callable[[Decision], None],
    ) -> Callable[[], None]:
        """Re-evaluate the guard on every session change; returns a stop callable."""
        return watch(self.session, route_kind, on_decision, **self._route_paths())

    def _route_paths(self) -> dict:
        return {
            "login_path": self._settings.login_path,
            "dashboard_path": self._settings.dashboard_path,
        }

    async def start(self) -> BootstrapResult:
        """Configure logging and settle the session from the startup refresh."""
        setup_logging(settings=self._settings)
        return await self.bootstrapper.bootstrap()

    async def load_dashboard(self) -> None:
        """Load what the dashboard shows on mount: the profile and the notes."""
        await asyncio.gather(self.profile.load(), self.notes.fetch_all())

    async def aclose(self) -> None:
        """Abandon background work and close the transport."""
        if self._bootstrapper is not None:
            self._bootstrapper.cancel_pending()
        if self._api_client is not None:
            await self._api_client.aclose()

    async def __aenter__(self) -> "ClientContainer":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
