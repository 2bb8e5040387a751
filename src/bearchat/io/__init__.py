"""I/O layer - Persistent key-value storage backends."""

from .key_value_store import InMemoryKeyValueStore, KeyValueStore
from .sqlite_key_value_store import SqliteKeyValueStore

__all__ = ["KeyValueStore", "InMemoryKeyValueStore", "SqliteKeyValueStore"]
