"""
lingobind/dom/element.py
────────────────────────
Element and document ports used by the binder, plus a plain in-memory
markup implementation.

The binder only ever needs five element capabilities (read/write an
attribute, read the tag name, write text content, write a placeholder) and
two document capabilities (walk elements in document order, set the title).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@runtime_checkable
class Element(Protocol):
    def get_attribute(self, name: str) -> str | None: ...

    def set_attribute(self, name: str, value: str) -> None: ...

    def get_tag(self) -> str: ...

    def set_content(self, text: str) -> None: ...

    def set_placeholder(self, text: str) -> None: ...


@runtime_checkable
class Document(Protocol):
    def iter_elements(self) -> Iterator[Element]: ...

    def set_title(self, text: str) -> None: ...


@dataclass
class MarkupElement:
    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    text: str = ""
    children: list[MarkupElement] = field(default_factory=list)

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def get_tag(self) -> str:
        return self.tag.lower()

    def set_content(self, text: str) -> None:
        self.text = text

    def set_placeholder(self, text: str) -> None:
        self.attributes["placeholder"] = text

    def walk(self) -> Iterator[MarkupElement]:
        """Yield this element and its descendants, pre-order."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass
class MarkupDocument:
    body: list[MarkupElement] = field(default_factory=list)
    title: str = ""

    def iter_elements(self) -> Iterator[MarkupElement]:
        for element in self.body:
            yield from element.walk()

    def set_title(self, text: str) -> None:
        self.title = text
