"""
Session bootstrap.

Runs the remote refresh-session call once at application start and settles
the SessionStore. A deadline (10 s by default) keeps a stalled network from
blocking the UI: when it fires first, the user is routed as unauthenticated
right away while the refresh keeps running in the background. A late success
still authenticates the session and hands over the token, but the loading
flag is never raised again.
"""

import asyncio
import logging
from typing import Optional

from shared.config import Settings, get_settings
from shared.exceptions import NotesClientError, SessionTimeoutError

from .interfaces import ISessionApi
from .models import BootstrapResult, BootstrapStatus, SessionGrant
from .store import SessionStore

logger = logging.getLogger(__name__)


class SessionBootstrapper:
    """
    Settles the SessionStore from the startup refresh call.

    ``bootstrap()`` is meant to run once per process; repeated calls are
    logged and return the first outcome without touching the network.
    """

    def __init__(
        self,
        api: ISessionApi,
        store: SessionStore,
        timeout_ms: Optional[int] = None,
        settings: Optional[Settings] = None,
    ):
        self._api = api
        self._store = store
        settings = settings or get_settings()
        self._timeout_ms = timeout_ms if timeout_ms is not None else settings.bootstrap_timeout_ms
        self._started = False
        self._result: Optional[BootstrapResult] = None
        self._pending: Optional[asyncio.Future] = None

    @property
    def timeout_ms(self) -> int:
        return self._timeout_ms

    @property
    def result(self) -> Optional[BootstrapResult]:
        """Outcome of the first bootstrap, once it has settled."""
        return self._result

    @property
    def has_pending_refresh(self) -> bool:
        """True while a refresh that outlived the deadline is still running."""
        return self._pending is not None and not self._pending.done()

    async def bootstrap(self) -> BootstrapResult:
        """
        Refresh the session and clear the loading flag exactly once.

        Returns:
            BootstrapResult describing how the refresh settled. Never raises
            for remote failures or the deadline.
        """
        if self._started:
            logger.warning("Session bootstrap already ran; ignoring repeated call")
            return self._result or self._snapshot_result()
        self._started = True

        refresh = asyncio.ensure_future(self._api.refresh_session())
        try:
            grant = await asyncio.wait_for(
                asyncio.shield(refresh),
                timeout=self._timeout_ms / 1000,
            )
        except asyncio.TimeoutError:
            timeout = SessionTimeoutError(self._timeout_ms)
            logger.warning("%s; continuing as unauthenticated", timeout.message)
            self._store.update(
                is_authenticated=False,
                requires_profile_completion=False,
                loading=False,
            )
            self._pending = refresh
            refresh.add_done_callback(self._on_late_refresh)
            self._result = BootstrapResult(status=BootstrapStatus.TIMED_OUT, reason=timeout.code)
        except NotesClientError as e:
            logger.info("Session refresh failed (%s); user is unauthenticated", e.code)
            self._settle_unauthenticated()
            self._result = BootstrapResult(status=BootstrapStatus.UNAUTHENTICATED, reason=e.code)
        except Exception as e:
            logger.exception("Session refresh raised unexpectedly")
            self._settle_unauthenticated()
            self._result = BootstrapResult(
                status=BootstrapStatus.UNAUTHENTICATED,
                reason=type(e).__name__,
            )
        else:
            self._accept(grant, clear_loading=True)
            self._result = BootstrapResult(
                status=BootstrapStatus.AUTHENTICATED,
                requires_profile_completion=grant.requires_profile_completion,
            )
        finally:
            # Cancellation of bootstrap() itself must not leave the UI loading.
            if self._store.get().loading:
                self._store.set_loading(False)

        return self._result

    async def wait_for_pending(self) -> None:
        """Wait until a refresh that outlived the deadline has settled."""
        if self._pending is None:
            return
        await asyncio.gather(self._pending, return_exceptions=True)
        # Let the done callback run before returning.
        await asyncio.sleep(0)

    def cancel_pending(self) -> None:
        """Abandon a refresh that outlived the deadline (used on shutdown)."""
        if self.has_pending_refresh:
            self._pending.cancel()

    def _accept(self, grant: SessionGrant, clear_loading: bool) -> None:
        self._api.set_access_token(grant.access_token)
        changes = {
            "is_authenticated": True,
            "requires_profile_completion": grant.requires_profile_completion,
        }
        if clear_loading:
            changes["loading"] = False
        self._store.update(**changes)

    def _settle_unauthenticated(self) -> None:
        self._store.update(
            is_authenticated=False,
            requires_profile_completion=False,
            loading=False,
        )

    def _on_late_refresh(self, task: asyncio.Future) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.info("Late session refresh failed: %s", error)
            return
        logger.info("Late session refresh succeeded; session is now authenticated")
        self._accept(task.result(), clear_loading=False)

    def _snapshot_result(self) -> BootstrapResult:
        state = self._store.get()
        if state.is_authenticated:
            return BootstrapResult(
                status=BootstrapStatus.AUTHENTICATED,
                requires_profile_completion=state.requires_profile_completion,
            )
        return BootstrapResult(status=BootstrapStatus.UNAUTHENTICATED, reason="in_progress")
