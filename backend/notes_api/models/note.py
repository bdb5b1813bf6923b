"""
Notes API Backend — Note Domain Model
=======================================

What:  Plain dataclasses for the stored note and for partial updates.
Why:   The store owns Note instances; keeping them free of any web or ORM
       framework lets a database-backed store produce the same objects.
Who:   Created and mutated only by the note store; read by the service and
       converted to response schemas by the routes.

Lifecycle:
    1. Created by the store on a validated create (created_at == updated_at)
    2. Mutated in place by a validated update (same id, newer updated_at)
    3. Removed permanently on delete (no tombstones)
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional


@dataclass
class Note:
    """A stored note."""

    id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    def copy(self) -> "Note":
        """Snapshot handed to callers so they cannot mutate stored state."""
        return replace(self)

    def __repr__(self) -> str:
        return f"<Note(id='{self.id}', title={self.title!r}, updated_at='{self.updated_at}')>"


@dataclass(frozen=True)
class NotePatch:
    """
    Partial update for a note.

    A field left as None is not supplied and keeps its stored value. Any
    string, including "", replaces the stored value.
    """

    title: Optional[str] = None
    content: Optional[str] = None

    def apply_to(self, note: Note, updated_at: datetime) -> Note:
        """Returns a new Note with the supplied fields merged in."""
        changes = {"updated_at": updated_at}
        if self.title is not None:
            changes["title"] = self.title
        if self.content is not None:
            changes["content"] = self.content
        return replace(note, **changes)
