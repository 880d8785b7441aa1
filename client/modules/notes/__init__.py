"""
Notes module.

Locally cached, server-synchronized collection of the user's notes.

Public API:
- NotesStore: Observable collection with fetch/create/update/delete
- INotesApi / HttpNotesApi: Remote notes capability
- Note, NotesState: Models
- Notes exceptions: EmptyNoteContentError, InvalidNotePayloadError
"""

from .interfaces import INotesApi
from .models import Note, NotesState, NoteWrite
from .exceptions import NotesError, EmptyNoteContentError, InvalidNotePayloadError
from .store import NotesStore
from .client import HttpNotesApi

__all__ = [
    # Interface
    "INotesApi",
    # Models
    "Note",
    "NotesState",
    "NoteWrite",
    # Exceptions
    "NotesError",
    "EmptyNoteContentError",
    "InvalidNotePayloadError",
    # Implementations
    "NotesStore",
    "HttpNotesApi",
]
