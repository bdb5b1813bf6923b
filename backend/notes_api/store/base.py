"""
Notes API Backend — Abstract Note Store Interface
===================================================

What:  Abstract base class defining the contract for note persistence.
Why:   The notes service depends on this interface only, so the in-memory
       store can be replaced by a database-backed one without changing
       validation or routes.
How:   Concrete stores inherit from NoteStore and implement every method.
Who:   Called by NotesService.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from notes_api.models.note import Note, NotePatch


class NoteStore(ABC):
    """
    Abstract interface for note persistence.

    Contract:
        - Every returned Note is an independent copy of the stored state
        - Identifiers are compared in their string form
        - get_by_id() signals "not found" by returning None, never by raising
        - update() and remove() raise NotFoundError for unknown ids
        - A write either fully succeeds or raises; nothing is partially applied
    """

    @abstractmethod
    def list(self) -> List[Note]:
        """All notes in insertion order. Never fails."""
        ...

    @abstractmethod
    def get_by_id(self, note_id: str) -> Optional[Note]:
        """The matching note, or None when no note has this id."""
        ...

    @abstractmethod
    def create(self, title: str, content: str = "") -> Note:
        """
        Store a new note.

        Assigns the next sequential id and stamps created_at and updated_at
        with the same instant. Inputs are expected to be validated already.
        """
        ...

    @abstractmethod
    def update(self, note_id: str, patch: NotePatch) -> Note:
        """
        Merge the supplied patch fields into an existing note.

        Raises:
            NotFoundError: No note has this id.
        """
        ...

    @abstractmethod
    def remove(self, note_id: str) -> Note:
        """
        Delete a note and return its last known state.

        Raises:
            NotFoundError: No note has this id.
        """
        ...
