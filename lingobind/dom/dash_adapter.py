"""
lingobind/dom/dash_adapter.py
─────────────────────────────
Treat a Dash component tree as a translatable document.

Dash html components accept wildcard ``data-*`` props, so the binding
contract maps directly onto them:

    layout = html.Div([
        html.H1(id="title", **{"data-i18n-key": "nav.overview"}),
        html.Textarea(id="search", **{"data-i18n-key": "forms.search"}),
    ])
    engine = I18n(document=DashDocument(layout, app=app))
    engine.translate(language="en")
"""

from __future__ import annotations

from collections.abc import Iterator

from dash import Dash
from dash.development.base_component import Component


class DashElement:
    def __init__(self, component: Component):
        self.component = component

    def get_attribute(self, name: str) -> str | None:
        value = getattr(self.component, name, None)
        return None if value is None else str(value)

    def set_attribute(self, name: str, value: str) -> None:
        setattr(self.component, name, value)

    def get_tag(self) -> str:
        return self.component._type.lower()

    def set_content(self, text: str) -> None:
        self.component.children = text

    def set_placeholder(self, text: str) -> None:
        self.component.placeholder = text


def iter_components(node) -> Iterator[Component]:
    """Yield every component under ``node`` in document order."""
    if isinstance(node, Component):
        yield node
        yield from iter_components(getattr(node, "children", None))
    elif isinstance(node, (list, tuple)):
        for child in node:
            yield from iter_components(child)


class DashDocument:
    def __init__(self, layout: Component, app: Dash | None = None):
        self.layout = layout
        self.app = app
        self.title = app.title if app is not None else ""

    def iter_elements(self) -> Iterator[DashElement]:
        for component in iter_components(self.layout):
            yield DashElement(component)

    def set_title(self, text: str) -> None:
        self.title = text
        if self.app is not None:
            self.app.title = text
