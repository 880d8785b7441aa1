"""
Notes module data models.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class Note(BaseModel):
    """
    A user note as returned by the server.

    The backend serializes the identifier as ``_id``; ``id`` is accepted too.
    """

    id: str = Field(..., validation_alias=AliasChoices("id", "_id"), description="Server-assigned ID")
    content: str = Field(..., description="Note body")

    model_config = {"frozen": True, "extra": "ignore"}


class NotesState(BaseModel):
    """
    Snapshot of the notes collection.

    ``loading`` is True only while a fetch is in flight. ``error`` is set
    only by a failed fetch and cleared when the next fetch starts.
    """

    items: tuple[Note, ...] = Field(default=(), description="Newest first")
    loading: bool = False
    error: Optional[str] = None

    model_config = {"frozen": True}


class NoteWrite(BaseModel):
    """Request body for create and update."""

    content: str = Field(..., min_length=1)
