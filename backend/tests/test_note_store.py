"""
Notes API Backend — In-Memory Note Store Unit Tests
=====================================================

What we test:
    ✅ Seed data, insertion order and sequential ids
    ✅ Reads return copies (callers cannot mutate stored notes)
    ✅ Partial updates merge only supplied fields and refresh updated_at
    ✅ update/remove of unknown ids raise NotFoundError; get returns None
    ✅ Concurrent creates still get unique sequential ids
"""

import threading

import pytest

from notes_api.exceptions import ErrorKind, NotFoundError
from notes_api.models.note import NotePatch
from notes_api.store.memory import SAMPLE_NOTES, InMemoryNoteStore


class TestSeedAndList:

    def test_seed_notes_present(self, store):
        notes = store.list()
        assert [n.id for n in notes] == ["1", "2"]
        assert [n.title for n in notes] == [title for title, _ in SAMPLE_NOTES]

    def test_unseeded_store_is_empty(self, empty_store):
        assert empty_store.list() == []
        assert len(empty_store) == 0

    def test_list_keeps_insertion_order(self, store):
        store.create(title="Third")
        store.create(title="Fourth")
        assert [n.title for n in store.list()][-2:] == ["Third", "Fourth"]

    def test_list_returns_copies(self, store):
        first = store.list()[0]
        first.title = "tampered"
        assert store.get_by_id("1").title == "Welcome to Notes"


class TestCreate:

    def test_ids_continue_after_seed(self, store):
        note = store.create(title="Buy milk")
        assert note.id == "3"

    def test_ids_start_at_one_without_seed(self, empty_store):
        assert empty_store.create(title="First").id == "1"

    def test_sequential_ids_strictly_increase(self, store):
        ids = [int(store.create(title=f"note {i}").id) for i in range(5)]
        assert ids == sorted(ids)
        assert len(set(ids)) == len(ids)

    def test_timestamps_equal_on_create(self, store, fake_clock):
        fake_clock.advance(30)
        note = store.create(title="Stamped")
        assert note.created_at == note.updated_at == fake_clock.now

    def test_content_defaults_to_empty(self, store):
        assert store.create(title="No body").content == ""

    def test_ids_not_reused_after_delete(self, store):
        created = store.create(title="Temp")
        store.remove(created.id)
        assert store.create(title="Next").id == str(int(created.id) + 1)

    def test_returned_note_is_a_copy(self, store):
        note = store.create(title="Original")
        note.title = "changed"
        assert store.get_by_id(note.id).title == "Original"


class TestGetById:

    def test_found(self, store):
        assert store.get_by_id("2").title == "Getting Started"

    def test_missing_returns_none(self, store):
        assert store.get_by_id("999") is None

    def test_numeric_id_compared_as_string(self, store):
        assert store.get_by_id(1).id == "1"


class TestUpdate:

    def test_content_only_keeps_title(self, store, fake_clock):
        before = store.get_by_id("1")
        fake_clock.advance(5)
        updated = store.update("1", NotePatch(content="new body"))
        assert updated.title == before.title
        assert updated.content == "new body"
        assert updated.created_at == before.created_at
        assert updated.updated_at > before.updated_at

    def test_empty_content_replaces(self, store):
        updated = store.update("1", NotePatch(content=""))
        assert updated.content == ""

    def test_title_only_keeps_content(self, store):
        before = store.get_by_id("2")
        updated = store.update("2", NotePatch(title="Renamed"))
        assert updated.title == "Renamed"
        assert updated.content == before.content

    def test_update_persists(self, store):
        store.update("1", NotePatch(title="Persisted"))
        assert store.get_by_id("1").title == "Persisted"

    def test_updated_at_never_moves_backwards(self, store, fake_clock):
        before = store.get_by_id("1")
        fake_clock.advance(-60)
        updated = store.update("1", NotePatch(content="x"))
        assert updated.updated_at == before.updated_at
        assert updated.updated_at >= updated.created_at

    def test_missing_raises_not_found(self, store):
        with pytest.raises(NotFoundError) as exc_info:
            store.update("42", NotePatch(title="a"))
        assert exc_info.value.kind is ErrorKind.NOT_FOUND
        assert exc_info.value.message == "Note not found"


class TestRemove:

    def test_returns_removed_note(self, store):
        removed = store.remove("1")
        assert removed.id == "1"
        assert removed.title == "Welcome to Notes"

    def test_then_get_returns_none(self, store):
        store.remove("1")
        assert store.get_by_id("1") is None

    def test_missing_raises_not_found(self, store):
        with pytest.raises(NotFoundError):
            store.remove("42")

    def test_second_remove_raises(self, store):
        store.remove("2")
        with pytest.raises(NotFoundError):
            store.remove("2")


class TestConcurrency:

    def test_concurrent_creates_get_unique_ids(self):
        store = InMemoryNoteStore(seed=False)
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            for i in range(25):
                store.create(title=f"t{i}")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ids = [int(n.id) for n in store.list()]
        assert len(ids) == 200
        assert sorted(ids) == list(range(1, 201))
