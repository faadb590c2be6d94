"""
lingobind/data/store.py
───────────────────────
Durable key/value storage for the remote-translation cache.

Provides:
  - KeyValueStorage : the port the cache layer talks to
  - MemoryStorage   : dict-backed store, shared by whoever holds the instance
  - SqliteStorage   : single-table SQLite store, one connection per path

Thread safety: uses check_same_thread=False + a module-level lock.
"""
from __future__ import annotations

import sqlite3
import threading
from typing import Protocol

from config.settings import settings
from lingobind.errors import StorageError

_lock = threading.RLock()
_CONNECTIONS: dict[str, sqlite3.Connection] = {}


class KeyValueStorage(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


class MemoryStorage:
    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value


# ── Connection ────────────────────────────────────────────────────────────────

def _get_conn(path: str) -> sqlite3.Connection:
    with _lock:
        conn = _CONNECTIONS.get(path)
        if conn is None:
            conn = sqlite3.connect(path, check_same_thread=False)
            _create_tables(conn)
            _CONNECTIONS[path] = conn
        return conn


def close_all() -> None:
    """Close every cached connection (used by tests and at shutdown)."""
    with _lock:
        for conn in _CONNECTIONS.values():
            conn.close()
        _CONNECTIONS.clear()


# ── Schema ────────────────────────────────────────────────────────────────────

_CREATE_KV = """
CREATE TABLE IF NOT EXISTS kv_store (
    key    TEXT PRIMARY KEY,
    value  TEXT NOT NULL
);
"""


def _create_tables(conn: sqlite3.Connection) -> None:
    with conn:
        conn.executescript(_CREATE_KV)


# ── Public API ────────────────────────────────────────────────────────────────

class SqliteStorage:
    """
    Key/value storage backed by one SQLite table.

    Instances pointing at the same path share one connection, so a cache
    written by one engine is visible to the next (including ":memory:"
    within a process).
    """

    def __init__(self, path: str = settings.STORAGE_PATH):
        self.path = path

    def get_item(self, key: str) -> str | None:
        try:
            conn = _get_conn(self.path)
            with _lock:
                row = conn.execute("SELECT value FROM kv_store WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as exc:
            raise StorageError(f"Could not read {key!r} from {self.path}") from exc
        return row[0] if row else None

    def set_item(self, key: str, value: str) -> None:
        try:
            conn = _get_conn(self.path)
            with _lock, conn:
                conn.execute(
                    "INSERT OR REPLACE INTO kv_store (key, value) VALUES (?, ?)",
                    (key, value),
                )
        except sqlite3.Error as exc:
            raise StorageError(f"Could not write {key!r} to {self.path}") from exc
