# Store package init
"""
Notes API Backend — Note Store Package
========================================

What:  Owns the authoritative collection of notes.
Why:   The store is a dumb persistence primitive. All business rules live in
       the notes service, so the store can be swapped for a database without
       duplicating validation.

Store Inventory:
    - NoteStore (abstract): Interface every store implements
    - InMemoryNoteStore: Process-local list guarded by a single lock
"""

from notes_api.store.base import NoteStore
from notes_api.store.memory import InMemoryNoteStore, SAMPLE_NOTES

__all__ = ["NoteStore", "InMemoryNoteStore", "SAMPLE_NOTES"]
