"""
Observable state container.

Stores hold one immutable snapshot (a frozen pydantic model). Every change
replaces the whole snapshot and then notifies subscribers, so an observer
never sees a half-applied update.
"""

import logging
from typing import Any, Callable, Generic, TypeVar

from pydantic import BaseModel

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=BaseModel)

Subscriber = Callable[[Any], None]
Unsubscribe = Callable[[], None]


class StateContainer(Generic[S]):
    """
    Holds a snapshot of type ``S`` and notifies subscribers on replacement.

    Subscribers are plain callables receiving the new snapshot. A subscriber
    that raises is logged and skipped; the remaining subscribers are still
    notified and the snapshot stays replaced.
    """

    def __init__(self, initial: S):
        self._state: S = initial
        self._subscribers: list[Subscriber] = []

    def get(self) -> S:
        """Get the current snapshot."""
        return self._state

    def replace(self, snapshot: S) -> S:
        """Replace the snapshot wholesale and notify subscribers."""
        self._state = snapshot
        self._notify(snapshot)
        return snapshot

    def update(self, **changes: Any) -> S:
        """Replace the snapshot with a copy carrying ``changes``."""
        return self.replace(self._state.model_copy(update=changes))

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        """
        Register an observer for snapshot changes.

        Returns:
            A callable that removes the observer again.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, snapshot: S) -> None:
        for callback in list(self._subscribers):
            try:
                callback(snapshot)
            except Exception:
                logger.exception(
                    "State subscriber %r failed on %s",
                    callback,
                    type(snapshot).__name__,
                )
