"""
Notes module exceptions.
"""

from shared.exceptions import NotesClientError, ValidationError


class NotesError(NotesClientError):
    """Base exception for notes-related errors."""

    pass


class EmptyNoteContentError(ValidationError):
    """Raised when a note would be written with empty content."""

    def __init__(self) -> None:
        super().__init__(
            "Note content cannot be empty",
            code="EMPTY_NOTE_CONTENT",
            details={"fields": {"content": "Note content cannot be empty"}},
        )


class InvalidNotePayloadError(NotesError):
    """Raised when the server returns something that is not a note."""

    def __init__(self, operation: str):
        super().__init__(
            f"Server returned an invalid note payload for {operation}",
            code="INVALID_NOTE_PAYLOAD",
            details={"operation": operation},
        )
