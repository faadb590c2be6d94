"""
lingobind/remote/loader.py
──────────────────────────
Fetch-or-reuse loading of translation dictionaries over HTTP.

Usage:
    loader = RemoteLoader(dictionary, cache)
    await loader.load_from("https://cdn.example.com/i18n.json", ttl_hours=6)

A valid cache entry short-circuits the request. Otherwise the document is
downloaded, cached and merged. Transport errors propagate untouched; a
non-success status raises HttpFailureError. Neither is retried.
"""
from __future__ import annotations

import httpx

from config.settings import settings
from lingobind.core.logging import get_module_logger
from lingobind.data.cache import CacheStore
from lingobind.errors import HttpFailureError, InvalidPayloadError, InvalidTtlError
from lingobind.i18n.dictionary import DictionaryStore

logger = get_module_logger()


class RemoteLoader:
    def __init__(
        self,
        dictionary: DictionaryStore,
        cache: CacheStore,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.dictionary = dictionary
        self.cache = cache
        self.client = client

    async def load_from(self, url: str, ttl_hours: float = settings.CACHE_TTL_HOURS) -> dict:
        """Merge the dictionary at ``url`` into the store and return it."""
        if not ttl_hours > 0:
            raise InvalidTtlError(ttl_hours)

        cached = self.cache.get(url)
        if cached is not None:
            logger.debug("remote_translations_cache_hit", url=url)
            self.dictionary.merge(cached)
            return cached

        payload = await self._fetch(url)
        self.cache.put(url, payload, ttl_hours)
        self.dictionary.merge(payload)
        logger.info(
            "remote_translations_fetched",
            url=url,
            languages=list(payload),
            ttl_hours=ttl_hours,
        )
        return payload

    async def _fetch(self, url: str) -> dict:
        if self.client is not None:
            response = await self.client.get(url)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.get(url)

        if not response.is_success:
            logger.warning(
                "remote_translations_http_error",
                url=url,
                status_code=response.status_code,
                reason=response.reason_phrase,
            )
            raise HttpFailureError(url, response.status_code, response.reason_phrase)

        payload = response.json()
        if not isinstance(payload, dict):
            raise InvalidPayloadError(url, payload)
        return payload
