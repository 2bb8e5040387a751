"""Key-value store abstraction shared by settings and the translation cache."""

from abc import ABC, abstractmethod
from typing import Optional

from bearchat.exceptions import StorageQuotaExceededError


class KeyValueStore(ABC):
    """
    Abstract string-to-string store.

    Settings and the translation cache each live under one well-known key.
    Every get/set is atomic and last-writer-wins; no multi-key transactions.
    Implementations raise StorageError on write failures.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store or overwrite a value."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
        pass


class InMemoryKeyValueStore(KeyValueStore):
    """
    Dictionary-backed store.

    Used for testing and session-level storage. No persistence.
    `max_value_bytes` emulates a storage quota: oversized writes raise
    StorageQuotaExceededError and leave the previous value untouched.
    """

    def __init__(self, max_value_bytes: Optional[int] = None):
        self._data: dict[str, str] = {}
        self.max_value_bytes = max_value_bytes

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.max_value_bytes is not None:
            size = len(value.encode("utf-8"))
            if size > self.max_value_bytes:
                raise StorageQuotaExceededError(
                    f"Value for {key!r} is {size} bytes, quota is {self.max_value_bytes}"
                )
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        """List stored keys (diagnostics and tests)."""
        return list(self._data.keys())
