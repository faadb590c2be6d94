"""
lingobind/i18n/translator.py
────────────────────────────
Translation engine: dictionary, element binding and remote loading behind
one object.

Usage:
    from lingobind.i18n.translator import I18n

    engine = I18n(document=doc)
    engine.load_dictionary({"es": {"nav": {"overview": "Resumen"}},
                            "en": {"nav": {"overview": "Overview"}}})
    engine.get_translation("nav.overview")          # → "Resumen"
    engine.get_translation("nav.overview", "en")    # → "Overview"
    engine.translate(language="en")                 # re-render every bound element

    await engine.load_from_remote("https://cdn.example.com/i18n.json", ttl_hours=6)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

import httpx

from config.settings import settings
from lingobind.core.logging import get_module_logger
from lingobind.data.cache import CacheStore, now_ms
from lingobind.data.models import CacheInfo, I18nStats, InitOptions
from lingobind.data.store import KeyValueStorage, SqliteStorage
from lingobind.dom.element import Document, Element
from lingobind.errors import InvalidKeyError, InvalidTtlError
from lingobind.i18n.binder import ElementBinder
from lingobind.i18n.dictionary import DictionaryStore
from lingobind.remote.loader import RemoteLoader

logger = get_module_logger()


class I18n:
    def __init__(
        self,
        document: Document | None = None,
        storage: KeyValueStorage | None = None,
        client: httpx.AsyncClient | None = None,
        clock: Callable[[], int] = now_ms,
        default_language: str = settings.DEFAULT_LANG,
        cache_ttl_hours: float = settings.CACHE_TTL_HOURS,
    ) -> None:
        self.document = document
        self._default_language = default_language
        self._current_language: str | None = None
        if not cache_ttl_hours > 0:
            raise InvalidTtlError(cache_ttl_hours)
        self.cache_ttl_hours = cache_ttl_hours

        self.dictionary = DictionaryStore()
        self.binder = ElementBinder(self.dictionary)
        self.cache = CacheStore(storage if storage is not None else SqliteStorage(), clock=clock)
        self.loader = RemoteLoader(self.dictionary, self.cache, client=client)

    # ── Setup ─────────────────────────────────────────────────────────────────

    async def initialize(
        self,
        default_language: str | None = None,
        remote_url: str | None = None,
        cache_ttl_hours: float | None = None,
    ) -> None:
        """Set the default language and, if given, load ``remote_url`` first."""
        options = InitOptions(
            default_language=default_language,
            remote_url=remote_url,
            cache_ttl_hours=cache_ttl_hours,
        )
        if options.default_language:
            self._default_language = options.default_language
        if options.cache_ttl_hours is not None:
            self.cache_ttl_hours = options.cache_ttl_hours
        if options.remote_url:
            await self.load_from_remote(options.remote_url, self.cache_ttl_hours)

    def load_dictionary(self, dataset: Mapping) -> None:
        """Replace all translations with ``dataset`` ({lang: nested mapping})."""
        self.dictionary.load(dataset)
        logger.debug("dictionary_loaded", languages=self.dictionary.languages())

    async def load_from_remote(self, url: str, ttl_hours: float | None = None) -> dict:
        return await self.loader.load_from(
            url, ttl_hours if ttl_hours is not None else self.cache_ttl_hours
        )

    # ── Lookup ────────────────────────────────────────────────────────────────

    def get_translation(self, key: str, language: str | None = None) -> str:
        """
        Translate a dot-separated key.

        Args:
            key: Dot-separated path, e.g. "nav.overview" or "labels.completed"
            language: Language override; uses the default language if None

        Returns:
            Translated string, or the key itself if not found.

        Raises:
            InvalidKeyError: if ``key`` is None or not a string.
        """
        if not isinstance(key, str):
            raise InvalidKeyError(key)
        return self.binder.lookup(key, language or self._default_language)

    # ── Rendering ─────────────────────────────────────────────────────────────

    def translate(self, language: str | None = None, target: Element | None = None) -> None:
        """Render ``target``, or every bound element of the document."""
        lang = language or self._default_language
        if target is not None:
            self.binder.bind_one(target, lang, self.document)
            return
        if self.document is None:
            logger.debug("translate_skipped_no_document", language=lang)
            return
        count = self.binder.bind_all(self.document, lang)
        logger.debug("document_translated", language=lang, elements=count)

    def fill_missing_language_tags(self) -> int:
        if self.document is None:
            return 0
        return self.binder.fill_missing_language_tags(self.document, self.current_language())

    # ── Language state ────────────────────────────────────────────────────────

    def current_language(self) -> str:
        return self._current_language or self._default_language

    def set_current_language(self, language: str | None) -> None:
        """Explicit page language; None falls back to the default language."""
        self._current_language = language

    @property
    def default_language(self) -> str:
        return self._default_language

    def set_default_language(self, language: str) -> None:
        self._default_language = language

    def list_languages(self) -> list[str]:
        return self.dictionary.languages()

    @property
    def translations(self) -> dict:
        return self.dictionary.to_dict()

    def stats(self) -> I18nStats:
        element_count = 0
        if self.document is not None:
            element_count = sum(1 for _ in self.binder.bound_elements(self.document))
        return I18nStats(
            element_count=element_count,
            languages=self.list_languages(),
            total_keys=self.dictionary.key_count(),
            current_language=self.current_language(),
            default_language=self._default_language,
        )

    # ── Cache ─────────────────────────────────────────────────────────────────

    def clear_cache(self) -> None:
        self.cache.clear_all()

    def cache_snapshot(self) -> dict[str, CacheInfo]:
        return self.cache.snapshot()
