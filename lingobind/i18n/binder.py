"""
lingobind/i18n/binder.py
────────────────────────
Writes resolved translations into bound elements.

An element is bound when it carries the key attribute (``data-i18n-key``).
After rendering, its language-tag attribute (``data-i18n-lang``) records the
language it was rendered in. Missing translations render the key itself so
gaps stay visible on the page.
"""

from __future__ import annotations

from collections.abc import Iterator

from config.settings import settings
from lingobind.dom.element import Document, Element
from lingobind.i18n.dictionary import DictionaryStore
from lingobind.i18n.tree import NOT_FOUND, resolve

_PLACEHOLDER_TAGS = frozenset({"input", "textarea"})


class ElementBinder:
    def __init__(
        self,
        dictionary: DictionaryStore,
        key_attribute: str = settings.KEY_ATTRIBUTE,
        lang_attribute: str = settings.LANG_ATTRIBUTE,
    ) -> None:
        self.dictionary = dictionary
        self.key_attribute = key_attribute
        self.lang_attribute = lang_attribute

    def lookup(self, key: str, language: str) -> str:
        """Resolved text for ``key`` in ``language``, or ``key`` on a miss."""
        value = resolve(self.dictionary.tree(language), key)
        return key if value is NOT_FOUND else value

    def bound_elements(self, document: Document) -> Iterator[Element]:
        for element in document.iter_elements():
            if element.get_attribute(self.key_attribute) is not None:
                yield element

    def bind_one(self, element: Element, language: str, document: Document | None = None) -> None:
        key = element.get_attribute(self.key_attribute)
        if not key:
            return

        text = self.lookup(key, language)
        tag = element.get_tag()
        if tag in _PLACEHOLDER_TAGS:
            element.set_placeholder(text)
        else:
            element.set_content(text)
            if tag == "title" and document is not None:
                document.set_title(text)

        element.set_attribute(self.lang_attribute, language)

    def bind_all(self, document: Document, language: str) -> int:
        """Re-render every bound element; returns how many were visited."""
        count = 0
        for element in self.bound_elements(document):
            self.bind_one(element, language, document)
            count += 1
        return count

    def fill_missing_language_tags(self, document: Document, current_language: str) -> int:
        count = 0
        for element in self.bound_elements(document):
            if element.get_attribute(self.lang_attribute) is None:
                element.set_attribute(self.lang_attribute, current_language)
                count += 1
        return count
