"""
lingobind/data/cache.py
───────────────────────
URL-keyed cache of downloaded translation payloads.

The whole table lives in memory and is written back to storage as a single
JSON object after every change:

    {"https://cdn/app.json": {"payload": {...}, "created_at": 1700000000000,
                              "url": "https://cdn/app.json", "ttl_hours": 24}}

An entry older than its TTL is treated as absent and dropped the next time
it is looked at. The cache is an optimisation only: unreadable or
unwritable storage is logged and otherwise ignored.
"""
from __future__ import annotations

import json
import time
from collections.abc import Callable

from pydantic import ValidationError

from config.settings import settings
from lingobind.core.logging import get_module_logger
from lingobind.data.models import CacheEntry, CacheInfo
from lingobind.data.store import KeyValueStorage
from lingobind.errors import StorageError

logger = get_module_logger()


def now_ms() -> int:
    return int(time.time() * 1000)


class CacheStore:
    def __init__(
        self,
        storage: KeyValueStorage,
        storage_key: str = settings.CACHE_STORAGE_KEY,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self.storage = storage
        self.storage_key = storage_key
        self.clock = clock
        self._entries: dict[str, CacheEntry] = self._load()
        self._prune()

    # ── Persistence ───────────────────────────────────────────────────────────

    def _load(self) -> dict[str, CacheEntry]:
        try:
            raw = self.storage.get_item(self.storage_key)
            if raw is None:
                return {}
            data = json.loads(raw)
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            return {url: CacheEntry.model_validate(entry) for url, entry in data.items()}
        except (StorageError, ValueError, ValidationError) as exc:
            logger.warning("cache_load_failed", storage_key=self.storage_key, error=str(exc))
            return {}

    def _save(self) -> None:
        blob = json.dumps(
            {url: entry.model_dump() for url, entry in self._entries.items()},
            ensure_ascii=False,
        )
        try:
            self.storage.set_item(self.storage_key, blob)
        except StorageError as exc:
            logger.warning("cache_save_failed", storage_key=self.storage_key, error=str(exc))

    def _prune(self) -> None:
        now = self.clock()
        expired = [url for url, entry in self._entries.items() if entry.is_expired(now)]
        if not expired:
            return
        for url in expired:
            del self._entries[url]
        logger.info("cache_entries_pruned", count=len(expired))
        self._save()

    # ── Public API ────────────────────────────────────────────────────────────

    def get(self, url: str) -> dict | None:
        """Cached payload for ``url``, or None when absent or expired."""
        entry = self._entries.get(url)
        if entry is None:
            return None
        if entry.is_expired(self.clock()):
            del self._entries[url]
            self._save()
            logger.info("cache_entry_expired", url=url, ttl_hours=entry.ttl_hours)
            return None
        return entry.payload

    def put(self, url: str, payload: dict, ttl_hours: float) -> None:
        self._entries[url] = CacheEntry(
            payload=payload,
            created_at=self.clock(),
            url=url,
            ttl_hours=ttl_hours,
        )
        self._save()

    def clear_all(self) -> None:
        self._entries = {}
        self._save()
        logger.info("cache_cleared", storage_key=self.storage_key)

    def snapshot(self) -> dict[str, CacheInfo]:
        """Per-URL age information; expired entries are reported, not removed."""
        now = self.clock()
        return {
            url: CacheInfo(
                created_at=entry.created_at,
                ttl_hours=entry.ttl_hours,
                is_expired=entry.is_expired(now),
            )
            for url, entry in self._entries.items()
        }

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, url: str) -> bool:
        return url in self._entries
