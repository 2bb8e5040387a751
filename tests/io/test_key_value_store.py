"""Unit tests for key-value store backends."""

import pytest

from bearchat.exceptions import StorageError, StorageQuotaExceededError
from bearchat.io import InMemoryKeyValueStore, SqliteKeyValueStore


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path):
    """Run the contract tests against every backend."""
    if request.param == "memory":
        yield InMemoryKeyValueStore()
    else:
        sqlite_store = SqliteKeyValueStore(tmp_path / "store.db")
        yield sqlite_store
        sqlite_store.close()


class TestKeyValueStoreContract:

    def test_get_missing_key_returns_none(self, store):
        assert store.get("missing") is None

    def test_set_and_get(self, store):
        store.set("bearchat-settings", '{"modelName": "m"}')
        assert store.get("bearchat-settings") == '{"modelName": "m"}'

    def test_set_overwrites(self, store):
        store.set("k", "old")
        store.set("k", "new")
        assert store.get("k") == "new"

    def test_delete(self, store):
        store.set("k", "v")
        store.delete("k")
        assert store.get("k") is None

    def test_delete_missing_key_does_not_raise(self, store):
        store.delete("missing")

    def test_keys_are_independent(self, store):
        store.set("a", "1")
        store.set("b", "2")
        store.delete("a")
        assert store.get("b") == "2"


class TestInMemoryQuota:

    def test_oversized_write_raises_and_keeps_previous_value(self):
        store = InMemoryKeyValueStore(max_value_bytes=10)
        store.set("k", "small")

        with pytest.raises(StorageQuotaExceededError):
            store.set("k", "x" * 11)

        assert store.get("k") == "small"

    def test_quota_error_is_storage_error(self):
        store = InMemoryKeyValueStore(max_value_bytes=1)
        with pytest.raises(StorageError):
            store.set("k", "ab")

    def test_quota_counts_utf8_bytes(self):
        store = InMemoryKeyValueStore(max_value_bytes=5)
        with pytest.raises(StorageQuotaExceededError):
            store.set("k", "你好")  # 6 bytes


class TestSqlitePersistence:

    def test_values_survive_reopen(self, tmp_path):
        db_path = tmp_path / "nested" / "store.db"
        first = SqliteKeyValueStore(db_path)
        first.set("bearchat-translations", "{}")
        first.close()

        second = SqliteKeyValueStore(db_path)
        assert second.get("bearchat-translations") == "{}"
        second.close()

    def test_unopenable_path_raises_storage_error(self, tmp_path):
        with pytest.raises(StorageError):
            SqliteKeyValueStore(tmp_path)
