"""SQLite-backed key-value persistence."""

import sqlite3
from pathlib import Path
from typing import Optional

from bearchat.exceptions import StorageError

from .key_value_store import KeyValueStore


class SqliteKeyValueStore(KeyValueStore):
    """Owns a SQLite connection holding a single `kv_store` table."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path)
        if str(self.db_path) != ":memory:":
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            self.connection = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise StorageError(f"Failed to open {self.db_path}: {e}") from e
        self.connection.row_factory = sqlite3.Row
        self.ensure_schema()

    def ensure_schema(self) -> None:
        """Create the table if it does not exist."""
        try:
            cur = self.connection.cursor()
            cur.execute(
                """
                CREATE TABLE IF NOT EXISTS kv_store (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP
                );
                """
            )
            self.connection.commit()
        except sqlite3.Error as e:
            self.connection.close()
            raise StorageError(f"Failed to initialize {self.db_path}: {e}") from e

    def get(self, key: str) -> Optional[str]:
        cur = self.connection.cursor()
        try:
            cur.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
            row = cur.fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"Failed to read {key!r}: {e}") from e
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        cur = self.connection.cursor()
        try:
            cur.execute(
                """
                INSERT INTO kv_store (key, value)
                VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (key, value),
            )
            self.connection.commit()
        except sqlite3.Error as e:
            self.connection.rollback()
            raise StorageError(f"Failed to write {key!r}: {e}") from e

    def delete(self, key: str) -> None:
        cur = self.connection.cursor()
        try:
            cur.execute("DELETE FROM kv_store WHERE key = ?", (key,))
            self.connection.commit()
        except sqlite3.Error as e:
            self.connection.rollback()
            raise StorageError(f"Failed to delete {key!r}: {e}") from e

    def close(self) -> None:
        self.connection.close()
