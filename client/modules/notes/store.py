"""
Notes store.

Holds the signed-in user's notes and keeps them in sync with the server:
- reads are full refreshes (the server list replaces ``items`` wholesale);
- writes are pessimistic (``items`` changes only after the server confirms).

Every fetch is tagged with a monotonic sequence number. Only the most
recently issued fetch may write ``items``/``error`` or clear ``loading``, so
a slow older response can never overwrite a newer one.
"""

import logging
from typing import Callable, Optional

from shared.exceptions import NotesClientError, user_message
from shared.notifications import NotificationBus
from shared.state import StateContainer

from .exceptions import EmptyNoteContentError
from .interfaces import INotesApi
from .models import Note, NotesState

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch notes"
CREATE_FAILED = "Failed to add note"
UPDATE_FAILED = "Failed to update note"
DELETE_FAILED = "Failed to delete note"


def _normalize(content: Optional[str]) -> str:
    """Trim surrounding whitespace; blank content becomes an empty string."""
    return (content or "").strip()


class NotesStore:
    """
    Observable notes collection with remote CRUD.

    No public operation raises: failures become one error notification
    (plus the ``error`` field for fetches) and leave ``items`` untouched.
    """

    def __init__(self, api: INotesApi, notifications: NotificationBus):
        self._state: StateContainer[NotesState] = StateContainer(NotesState())
        self._api = api
        self._notifications = notifications
        self._fetch_seq = 0

    def get(self) -> NotesState:
        """Get the current notes snapshot."""
        return self._state.get()

    def subscribe(self, callback: Callable[[NotesState], None]) -> Callable[[], None]:
        """Observe snapshot changes; returns an unsubscribe callable."""
        return self._state.subscribe(callback)

    @property
    def items(self) -> tuple[Note, ...]:
        return self._state.get().items

    async def fetch_all(self) -> bool:
        """
        Replace the collection with the server's list.

        Returns:
            True if this fetch's response was applied.
        """
        self._fetch_seq += 1
        seq = self._fetch_seq
        self._state.update(loading=True, error=None)

        try:
            notes = await self._api.list_notes()
        except Exception as e:
            if seq != self._fetch_seq:
                logger.debug("Discarding failure of superseded fetch #%d", seq)
                return False
            message = self._report("fetch_all", e, FETCH_FAILED)
            self._state.update(error=message, loading=False)
            return False
        else:
            if seq != self._fetch_seq:
                logger.debug("Discarding stale response of fetch #%d (latest #%d)", seq, self._fetch_seq)
                return False
            self._state.update(items=tuple(notes), loading=False)
            logger.debug("Fetched %d notes", len(notes))
            return True
        finally:
            # Only reached with loading still set when the fetch was cancelled.
            if seq == self._fetch_seq and self._state.get().loading:
                self._state.update(loading=False)

    async def create(self, content: str) -> Optional[Note]:
        """
        Create a note and prepend the server's copy.

        Returns:
            The created note, or None on failure.
        """
        content = _normalize(content)
        if not content:
            self._report("create", EmptyNoteContentError(), CREATE_FAILED)
            return None

        try:
            note = await self._api.create_note(content)
        except Exception as e:
            self._report("create", e, CREATE_FAILED)
            return None

        self._state.update(items=(note, *self._state.get().items))
        return note

    async def update(self, note_id: str, content: str) -> Optional[Note]:
        """
        Update a note and swap in the server's representation by ID.

        Returns:
            The updated note, or None on failure.
        """
        content = _normalize(content)
        if not content:
            self._report("update", EmptyNoteContentError(), UPDATE_FAILED)
            return None

        try:
            note = await self._api.update_note(note_id, content)
        except Exception as e:
            self._report("update", e, UPDATE_FAILED)
            return None

        items = tuple(note if item.id == note_id else item for item in self._state.get().items)
        self._state.update(items=items)
        return note

    async def delete(self, note_id: str) -> bool:
        """
        Delete a note and drop it from the collection.

        Returns:
            True if the server confirmed the deletion.
        """
        try:
            await self._api.delete_note(note_id)
        except Exception as e:
            self._report("delete", e, DELETE_FAILED)
            return False

        items = tuple(item for item in self._state.get().items if item.id != note_id)
        self._state.update(items=items)
        return True

    def _report(self, operation: str, error: Exception, fallback: str) -> str:
        """Log the failure and emit one error notification; returns its text."""
        if isinstance(error, NotesClientError):
            logger.warning("Notes %s failed: %s", operation, error.to_dict())
        else:
            logger.exception("Notes %s raised unexpectedly", operation)
        message = user_message(error, fallback)
        self._notifications.error(f"notes.{operation}", message)
        return message
