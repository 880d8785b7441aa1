"""
HTTP implementation of the notes capability.
"""

from typing import Any
from urllib.parse import quote

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from shared.api_client import ApiClient

from .exceptions import InvalidNotePayloadError
from .interfaces import INotesApi
from .models import Note, NoteWrite

NOTES_PATH = "/notes"

_note_list = TypeAdapter(list[Note])


def _note_path(note_id: str) -> str:
    return f"{NOTES_PATH}/{quote(note_id, safe='')}"


class HttpNotesApi(INotesApi):
    """Notes CRUD through the shared ApiClient."""

    def __init__(self, api: ApiClient):
        self._api = api

    async def list_notes(self) -> list[Note]:
        response = await self._api.get(NOTES_PATH)
        try:
            return _note_list.validate_python(response.data or [])
        except PydanticValidationError:
            raise InvalidNotePayloadError("list")

    async def create_note(self, content: str) -> Note:
        body = NoteWrite(content=content).model_dump()
        response = await self._api.post(NOTES_PATH, json=body)
        return self._parse(response.data, "create")

    async def update_note(self, note_id: str, content: str) -> Note:
        body = NoteWrite(content=content).model_dump()
        response = await self._api.patch(_note_path(note_id), json=body)
        return self._parse(response.data, "update")

    async def delete_note(self, note_id: str) -> None:
        await self._api.delete(_note_path(note_id))

    @staticmethod
    def _parse(data: Any, operation: str) -> Note:
        try:
            return Note.model_validate(data)
        except PydanticValidationError:
            raise InvalidNotePayloadError(operation)
