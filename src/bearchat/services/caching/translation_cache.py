"""Translation Cache - persistent, model-aware store of finished translations."""

import json
import logging
import time
from dataclasses import asdict, dataclass
from datetime import timedelta
from typing import Callable, Optional

from bearchat.exceptions import StorageError
from bearchat.io import KeyValueStore

logger = logging.getLogger(__name__)

DEFAULT_EXPIRATION = timedelta(hours=24)
DEFAULT_MAX_ITEMS = 100


@dataclass(frozen=True)
class CacheEntry:
    """A cached translation. `timestamp` is epoch milliseconds at write time."""

    translation: str
    timestamp: int
    model: str


def make_cache_key(text: str, from_lang: str, to_lang: str) -> str:
    """
    Derive the cache key for a request.

    Keys are case-insensitive: requests differing only in letter case share an
    entry. Language codes are plain strings or `Language` members.
    """
    return f"{text}_{str(from_lang)}_{str(to_lang)}".lower()


class TranslationCache:
    """
    Best-effort translation cache persisted under a single store key.

    The whole table is one JSON object mapping cache keys to
    ``{translation, timestamp, model}``. Entries expire after
    `expiration_time`; at most `max_items` entries are kept, newest
    write first. The cache is never a source of truth: read failures look
    like an empty cache and write failures are absorbed.
    """

    STORAGE_KEY = "bearchat-translations"

    def __init__(
        self,
        store: KeyValueStore,
        expiration_time: timedelta = DEFAULT_EXPIRATION,
        max_items: int = DEFAULT_MAX_ITEMS,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize the cache.

        Args:
            store: Backend holding the serialized table.
            expiration_time: Age after which an entry reads as absent.
            max_items: Upper bound on retained entries.
            clock: Returns the current time in seconds since the epoch.
        """
        if max_items < 1:
            raise ValueError("max_items must be at least 1")
        self._store = store
        self._expiration_ms = int(expiration_time.total_seconds() * 1000)
        self.max_items = max_items
        self._clock = clock

    def get(self, text: str, from_lang: str, to_lang: str, model: str) -> Optional[str]:
        """
        Return the cached translation, or None.

        Misses include: no entry, an entry produced by a different model, and
        an expired entry.
        """
        entries = self._load()
        entry = entries.get(make_cache_key(text, from_lang, to_lang))

        if entry is None:
            return None
        if entry.model != model or self._is_expired(entry):
            return None
        return entry.translation

    def set(
        self,
        text: str,
        from_lang: str,
        to_lang: str,
        translation: str,
        model: str,
    ) -> None:
        """Store or overwrite an entry, then prune expired and excess entries."""
        entries = self._load()
        key = make_cache_key(text, from_lang, to_lang)

        # Re-insert so an overwritten key also moves to the newest position
        entries.pop(key, None)
        entries[key] = CacheEntry(
            translation=translation,
            timestamp=self._now_ms(),
            model=model,
        )

        self._save(self._cleanup(entries))

    def clear(self) -> None:
        """Remove all entries."""
        try:
            self._store.delete(self.STORAGE_KEY)
        except StorageError as e:
            logger.warning("Failed to clear translation cache: %s", e)

    def list_keys(self) -> list[str]:
        """
        List stored cache keys, including expired ones not yet purged.

        Useful for diagnostics and testing.
        """
        return list(self._load().keys())

    def __len__(self) -> int:
        return len(self._load())

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def _is_expired(self, entry: CacheEntry) -> bool:
        return self._now_ms() - entry.timestamp > self._expiration_ms

    def _cleanup(self, entries: dict[str, CacheEntry]) -> dict[str, CacheEntry]:
        """Drop expired entries, then keep the `max_items` most recent."""
        valid = {k: e for k, e in entries.items() if not self._is_expired(e)}
        return self._most_recent(valid, self.max_items)

    @staticmethod
    def _most_recent(entries: dict[str, CacheEntry], limit: int) -> dict[str, CacheEntry]:
        # Ties on timestamp resolve to the later insertion
        ranked = sorted(
            enumerate(entries.items()),
            key=lambda item: (item[1][1].timestamp, item[0]),
            reverse=True,
        )
        kept = [pair for _, pair in ranked[:limit]]
        # Persist oldest first so insertion order keeps matching write order
        kept.reverse()
        return dict(kept)

    def _load(self) -> dict[str, CacheEntry]:
        try:
            raw = self._store.get(self.STORAGE_KEY)
        except StorageError as e:
            logger.warning("Failed to read translation cache: %s", e)
            return {}

        if not raw:
            return {}

        try:
            data = json.loads(raw)
            return {
                key: CacheEntry(
                    translation=str(item["translation"]),
                    timestamp=int(item["timestamp"]),
                    model=str(item["model"]),
                )
                for key, item in data.items()
            }
        except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Discarding corrupt translation cache: %s", e)
            return {}

    def _save(self, entries: dict[str, CacheEntry]) -> None:
        try:
            self._write(entries)
            return
        except StorageError as e:
            logger.warning(
                "Translation cache write failed (%s); compacting to %d entries",
                e,
                self.max_items // 2,
            )

        # Forced compaction ignores expiry and keeps only the newest half
        compacted = self._most_recent(entries, self.max_items // 2)
        try:
            self._write(compacted)
        except StorageError as e:
            logger.error("Translation cache write dropped after compaction: %s", e)

    def _write(self, entries: dict[str, CacheEntry]) -> None:
        payload = {key: asdict(entry) for key, entry in entries.items()}
        self._store.set(self.STORAGE_KEY, json.dumps(payload, ensure_ascii=False))
