"""
Notes module interface.

NotesStore depends on INotesApi, not on the HTTP client. Tests inject
fakes built on AsyncMock.
"""

from typing import Protocol, runtime_checkable

from .models import Note


@runtime_checkable
class INotesApi(Protocol):
    """Remote CRUD capability for the signed-in user's notes."""

    async def list_notes(self) -> list[Note]:
        """
        Fetch the full, ordered notes collection.

        Raises:
            RemoteError: On a non-2xx response or transport failure
        """
        ...

    async def create_note(self, content: str) -> Note:
        """
        Create a note.

        Returns:
            The created note with its server-assigned ID
        """
        ...

    async def update_note(self, note_id: str, content: str) -> Note:
        """
        Replace a note's content.

        Returns:
            The server's representation of the updated note
        """
        ...

    async def delete_note(self, note_id: str) -> None:
        """Delete a note."""
        ...
