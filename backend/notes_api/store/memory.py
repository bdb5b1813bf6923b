"""
Notes API Backend — In-Memory Note Store
==========================================

What:  Process-local implementation of NoteStore with seed data.
Why:   The service needs no durable storage; a list keeps insertion order
       and is trivially inspectable in tests.
How:   Notes live in a list owned by the store instance. Ids come from an
       integer counter that only ever grows, so ids are never reused after a
       delete. Every operation runs under one lock.

Thread Safety:
    The async routes call the store on the event loop, but the store itself
    may be shared by threaded callers (sync handlers, workers, tests). A
    single threading.Lock over the collection keeps id assignment sequential
    and unique. No operation suspends while holding it.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, Tuple

from notes_api.exceptions import NotFoundError
from notes_api.models.note import Note, NotePatch
from notes_api.store.base import NoteStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# Fixture data so a fresh process is immediately demonstrable. Ids "1" and "2".
SAMPLE_NOTES: Tuple[Tuple[str, str], ...] = (
    (
        "Welcome to Notes",
        "This is a sample note. You can create, edit, and delete notes.",
    ),
    (
        "Getting Started",
        "Use POST /api/notes to add a new note.",
    ),
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryNoteStore(NoteStore):
    """
    List-backed note store.

    Args:
        seed:  Pre-populate with SAMPLE_NOTES (ids "1" and "2").
        clock: Zero-argument callable returning an aware datetime. Tests pass
               a fake clock to control timestamps.
    """

    def __init__(self, seed: bool = True, clock: Optional[Clock] = None):
        self._clock = clock or utc_now
        self._lock = threading.Lock()
        self._items: List[Note] = []
        self._last_id = 0

        if seed:
            self._seed(SAMPLE_NOTES)

    def _seed(self, samples: Iterable[Tuple[str, str]]) -> None:
        now = self._clock()
        for title, content in samples:
            self._last_id += 1
            self._items.append(
                Note(
                    id=str(self._last_id),
                    title=title,
                    content=content,
                    created_at=now,
                    updated_at=now,
                )
            )
        logger.debug("Seeded store with %d sample notes", len(self._items))

    def _index_of(self, note_id: str) -> int:
        """Position of the note in the list, or -1. Caller holds the lock."""
        key = str(note_id)
        for idx, note in enumerate(self._items):
            if note.id == key:
                return idx
        return -1

    def list(self) -> List[Note]:
        with self._lock:
            return [note.copy() for note in self._items]

    def get_by_id(self, note_id: str) -> Optional[Note]:
        with self._lock:
            idx = self._index_of(note_id)
            if idx == -1:
                return None
            return self._items[idx].copy()

    def create(self, title: str, content: str = "") -> Note:
        with self._lock:
            self._last_id += 1
            now = self._clock()
            note = Note(
                id=str(self._last_id),
                title=title,
                content=content or "",
                created_at=now,
                updated_at=now,
            )
            self._items.append(note)
            return note.copy()

    def update(self, note_id: str, patch: NotePatch) -> Note:
        with self._lock:
            idx = self._index_of(note_id)
            if idx == -1:
                raise NotFoundError(resource="note", resource_id=str(note_id))

            current = self._items[idx]
            # updated_at never moves backwards, even if the wall clock does
            updated_at = max(self._clock(), current.updated_at)
            updated = patch.apply_to(current, updated_at=updated_at)
            self._items[idx] = updated
            return updated.copy()

    def remove(self, note_id: str) -> Note:
        with self._lock:
            idx = self._index_of(note_id)
            if idx == -1:
                raise NotFoundError(resource="note", resource_id=str(note_id))
            removed = self._items.pop(idx)
            return removed.copy()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
