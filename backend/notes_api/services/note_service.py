"""
Notes API Backend — Notes Service (Validation & Normalization)
================================================================

What:  Enforces input contracts before anything touches the note store.
Why:   This is the only place business rules live. The store stays a dumb
       persistence primitive that can be swapped for a database.
How:   Validates raw JSON payloads, trims titles, defaults content, builds a
       NotePatch for updates, then delegates to the injected NoteStore.
Who:   Called by the notes route handlers.

Error Handling Strategy:
    Bad input raises ValidationError. NotFoundError from the store propagates
    unchanged. get_note_by_id() returns None for unknown ids and leaves the
    response decision to the caller.
"""

import logging
from typing import Any, List, Mapping, Optional

from notes_api.exceptions import ValidationError
from notes_api.models.note import Note, NotePatch
from notes_api.store.base import NoteStore

logger = logging.getLogger(__name__)

TITLE_REQUIRED = 'Validation failed: "title" is required and must be a non-empty string.'
UPDATE_EMPTY = 'Validation failed: provide "title" and/or "content" to update.'
TITLE_INVALID = 'Validation failed: "title" must be a non-empty string when provided.'
CONTENT_INVALID = 'Validation failed: "content" must be a string when provided.'


def _as_mapping(payload: Any) -> Mapping[str, Any]:
    # A missing or non-object body carries no fields
    if isinstance(payload, Mapping):
        return payload
    return {}


def _clean_title(value: Any) -> Optional[str]:
    """Trimmed title, or None when the value is not a non-blank string."""
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed or None


class NotesService:
    """
    Business logic layer for note operations.

    Args:
        store: Any NoteStore implementation, injected at construction.
    """

    def __init__(self, store: NoteStore):
        self.store = store

    def list_notes(self) -> List[Note]:
        return self.store.list()

    def get_note_by_id(self, note_id: str) -> Optional[Note]:
        """Returns the note, or None when it does not exist."""
        return self.store.get_by_id(note_id)

    def create_note(self, payload: Any) -> Note:
        """
        Create a note from a raw payload.

        Rules:
            - title is required, must be a string, non-empty after trimming
            - title is stored trimmed
            - content is kept when it is a string, otherwise defaults to ""

        Raises:
            ValidationError: title missing, blank, or not a string.
        """
        data = _as_mapping(payload)
        title = _clean_title(data.get("title"))
        if title is None:
            raise ValidationError(message=TITLE_REQUIRED, field="title")

        content = data.get("content")
        if not isinstance(content, str):
            content = ""

        note = self.store.create(title=title, content=content)
        logger.info("Note %s created", note.id)
        return note

    def update_note(self, note_id: str, payload: Any) -> Note:
        """
        Apply a partial update.

        A payload whose title/content keys are all missing or null supplies
        nothing and is rejected. Otherwise every present key is validated,
        null included: a title follows the create rules, a content must be a
        string and may be empty.

        Raises:
            ValidationError: nothing supplied, or a present field is invalid.
            NotFoundError:   no note has this id (from the store).
        """
        data = _as_mapping(payload)
        present = {key: data[key] for key in ("title", "content") if key in data}

        if all(value is None for value in present.values()):
            raise ValidationError(message=UPDATE_EMPTY)

        title = None
        if "title" in present:
            title = _clean_title(present["title"])
            if title is None:
                raise ValidationError(message=TITLE_INVALID, field="title")

        content = present.get("content")
        if "content" in present and not isinstance(content, str):
            raise ValidationError(message=CONTENT_INVALID, field="content")

        note = self.store.update(note_id, NotePatch(title=title, content=content))
        logger.info("Note %s updated", note.id)
        return note

    def delete_note(self, note_id: str) -> Note:
        """
        Remove a note and return its last state.

        Raises:
            NotFoundError: no note has this id (from the store).
        """
        note = self.store.remove(note_id)
        logger.info("Note %s deleted", note.id)
        return note
