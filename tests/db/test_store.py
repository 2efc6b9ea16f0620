"""Tests for the write-through JSON document store."""

from __future__ import annotations

import json

import pytest

from studio.core.errors import NotFoundError, StorageError
from studio.db.store import JsonDocumentStore


class TestJsonDocumentStore:
    """Test the JSON Document Store."""

    @pytest.fixture
    def store(self, tmp_path) -> JsonDocumentStore:
        return JsonDocumentStore.open(str(tmp_path / "store.json"), name="projects")

    async def test_put_assigns_id_when_missing(self, store: JsonDocumentStore) -> None:
        """Verify a fresh id is generated for documents saved without one."""
        saved = await store.put(None, {"name": "A"})

        assert saved["id"]
        assert saved["name"] == "A"
        assert await store.get(saved["id"]) == saved

    async def test_put_treats_empty_id_as_new(self, store: JsonDocumentStore) -> None:
        """Verify an empty id is replaced with a generated one."""
        first = await store.put("", {"name": "A"})
        second = await store.put("", {"name": "B"})

        assert first["id"] != second["id"]
        assert len(await store.keys()) == 2

    async def test_put_stamps_last_modified(self, store: JsonDocumentStore) -> None:
        """Verify last_modified is stamped on save."""
        saved = await store.put("p1", {"name": "A", "last_modified": 1.0})

        assert saved["last_modified"] > 1.0

    async def test_put_writes_whole_map_to_disk(self, store: JsonDocumentStore) -> None:
        """Verify every mutation rewrites the full file."""
        await store.put("p1", {"name": "A"})
        await store.put("p2", {"name": "B"})

        on_disk = json.loads(store.path.read_text(encoding="utf-8"))
        assert set(on_disk) == {"p1", "p2"}
        assert on_disk["p2"]["name"] == "B"

    async def test_list_orders_by_last_modified_desc(self, store: JsonDocumentStore, monkeypatch) -> None:
        """Verify the newest document is listed first."""
        stamps = iter([1000.0, 2000.0])
        monkeypatch.setattr("studio.db.store.now_ms", lambda: next(stamps))

        await store.put("old", {"name": "old"})
        await store.put("new", {"name": "new"})

        listed = await store.list()

        assert [doc["id"] for doc in listed] == ["new", "old"]

    async def test_list_keeps_insertion_order_on_ties(self, tmp_path) -> None:
        """Verify equal timestamps keep a stable order."""
        path = tmp_path / "ties.json"
        path.write_text(json.dumps({
            "a": {"id": "a", "last_modified": 5},
            "b": {"id": "b", "last_modified": 5},
            "c": {"id": "c", "last_modified": 9},
        }))
        store = JsonDocumentStore.open(str(path))

        listed = await store.list()

        assert [doc["id"] for doc in listed] == ["c", "a", "b"]

    async def test_get_missing_raises_not_found(self, store: JsonDocumentStore) -> None:
        """Verify a missing key raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await store.get("nope")

    async def test_returned_documents_are_copies(self, store: JsonDocumentStore) -> None:
        """Verify callers cannot mutate the in-memory map."""
        saved = await store.put("p1", {"name": "A", "layout": []})
        saved["layout"].append({"type": "button"})

        fetched = await store.get("p1")
        fetched["name"] = "changed"

        assert await store.get("p1") == {**fetched, "name": "A", "layout": []}

    async def test_delete_removes_document(self, store: JsonDocumentStore) -> None:
        """Verify delete removes the key durably."""
        await store.put("p1", {"name": "A"})

        await store.delete("p1")

        with pytest.raises(NotFoundError):
            await store.get("p1")
        assert json.loads(store.path.read_text(encoding="utf-8")) == {}

    async def test_delete_missing_raises_not_found(self, store: JsonDocumentStore) -> None:
        """Verify deleting an unknown key raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await store.delete("nope")

    async def test_update_passes_current_value(self, store: JsonDocumentStore) -> None:
        """Verify update receives the current value, or None for a new key."""
        seen = []

        def append_one(current):
            seen.append(current)
            return (current or []) + [len(seen)]

        await store.update("k", append_one)
        result = await store.update("k", append_one)

        assert seen == [None, [1]]
        assert result == [1, 2]

    async def test_reload_from_disk(self, store: JsonDocumentStore) -> None:
        """Verify a new store instance sees persisted data."""
        await store.put("p1", {"name": "A"})

        reopened = JsonDocumentStore.open(str(store.path))

        assert (await reopened.get("p1"))["name"] == "A"

    def test_load_malformed_file_starts_empty(self, tmp_path) -> None:
        """Verify a corrupted file is logged and ignored."""
        path = tmp_path / "broken.json"
        path.write_text("{not json")

        store = JsonDocumentStore.open(str(path))

        assert store._data == {}

    def test_load_non_object_starts_empty(self, tmp_path) -> None:
        """Verify a JSON file that is not an object is ignored."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]")

        store = JsonDocumentStore.open(str(path))

        assert store._data == {}


class TestStoreRollback:
    """Test that failed persistence never leaves memory divergent."""

    @pytest.fixture
    async def store(self, tmp_path) -> JsonDocumentStore:
        store = JsonDocumentStore.open(str(tmp_path / "store.json"), name="projects")
        await store.put("existing", {"name": "before"})
        return store

    async def test_failed_insert_is_removed(self, store, fail_writes) -> None:
        """Verify a fresh insert disappears when the write fails."""
        fail_writes(store)

        with pytest.raises(StorageError):
            await store.put("fresh", {"name": "new"})

        with pytest.raises(NotFoundError):
            await store.get("fresh")

    async def test_failed_overwrite_restores_previous(self, store, fail_writes) -> None:
        """Verify an overwrite is reverted to the prior value."""
        before = await store.get("existing")
        fail_writes(store)

        with pytest.raises(StorageError):
            await store.put("existing", {"name": "after"})

        assert await store.get("existing") == before

    async def test_failed_delete_reinserts(self, store, fail_writes) -> None:
        """Verify a delete is undone when the write fails."""
        before = await store.get("existing")
        fail_writes(store)

        with pytest.raises(StorageError):
            await store.delete("existing")

        assert await store.get("existing") == before

    async def test_failed_update_restores_previous(self, store, fail_writes) -> None:
        """Verify update rolls back to the value before the mutator ran."""
        before = await store.get("existing")
        fail_writes(store)

        with pytest.raises(StorageError):
            await store.update("existing", lambda current: {**current, "name": "x"})

        assert await store.get("existing") == before

    async def test_failed_write_keeps_file_unchanged(self, store, fail_writes) -> None:
        """Verify the durable file still holds the last good state."""
        on_disk = store.path.read_text(encoding="utf-8")
        fail_writes(store)

        with pytest.raises(StorageError):
            await store.put("fresh", {"name": "new"})

        assert store.path.read_text(encoding="utf-8") == on_disk

    async def test_unserializable_value_is_rolled_back(self, store) -> None:
        """Verify a value that cannot be encoded is treated as a failed write."""
        with pytest.raises(StorageError):
            await store.put("bad", {"value": object()})

        with pytest.raises(NotFoundError):
            await store.get("bad")
