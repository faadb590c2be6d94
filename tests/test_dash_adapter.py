"""
tests/test_dash_adapter.py
──────────────────────────
Tests for translating Dash component trees.
"""
import dash
import pytest
from dash import dcc, html

from lingobind.data.store import MemoryStorage
from lingobind.dom.dash_adapter import DashDocument, DashElement, iter_components
from lingobind.i18n.translator import I18n


def _layout():
    return html.Div(
        [
            html.Title("SAG Monitor", id="page-title", **{"data-i18n-key": "title"}),
            html.H1(id="heading", **{"data-i18n-key": "nav.overview"}),
            html.Ul(
                [
                    html.Li(id="li-alerts", **{"data-i18n-key": "nav.alerts"}),
                    html.Li("static", id="li-static"),
                ]
            ),
            html.Textarea(id="search", **{"data-i18n-key": "forms.search"}),
            html.Textarea(id="notes", **{"data-i18n-key": "missing.key"}),
        ],
        id="root",
    )


def _by_id(layout, component_id):
    return next(c for c in iter_components(layout) if getattr(c, "id", None) == component_id)


@pytest.fixture
def app():
    return dash.Dash(__name__, title="untitled")


@pytest.fixture
def engine(app, sample_dataset, clock):
    layout = _layout()
    engine = I18n(document=DashDocument(layout, app=app), storage=MemoryStorage(), clock=clock)
    engine.load_dictionary(sample_dataset)
    return engine


class TestIterComponents:
    def test_document_order(self):
        ids = [getattr(c, "id", None) for c in iter_components(_layout())]
        assert ids == ["root", "page-title", "heading", None, "li-alerts", "li-static", "search", "notes"]

    def test_skips_strings_and_none(self):
        assert list(iter_components("text")) == []
        assert list(iter_components(None)) == []


class TestDashElement:
    def test_reads_wildcard_attribute(self):
        el = DashElement(html.Span(**{"data-i18n-key": "a.b"}))
        assert el.get_attribute("data-i18n-key") == "a.b"
        assert el.get_attribute("data-i18n-lang") is None

    def test_written_attribute_is_serialized(self):
        component = html.Span(**{"data-i18n-key": "a.b"})
        DashElement(component).set_attribute("data-i18n-lang", "en")
        assert component.to_plotly_json()["props"]["data-i18n-lang"] == "en"

    def test_textarea_takes_key_and_placeholder(self):
        component = html.Textarea(**{"data-i18n-key": "forms.search"})
        el = DashElement(component)
        el.set_placeholder("Buscar...")
        assert el.get_attribute("data-i18n-key") == "forms.search"
        assert component.to_plotly_json()["props"]["placeholder"] == "Buscar..."

    def test_tag_is_lowercase_type(self):
        assert DashElement(dcc.Input()).get_tag() == "input"
        assert DashElement(html.Textarea()).get_tag() == "textarea"
        assert DashElement(html.Title()).get_tag() == "title"


class TestTranslateDashLayout:
    def test_renders_children_and_placeholders(self, engine):
        engine.translate(language="en")
        layout = engine.document.layout
        assert _by_id(layout, "heading").children == "Overview"
        assert _by_id(layout, "li-alerts").children == "Alerts"
        assert _by_id(layout, "search").placeholder == "Search..."
        assert _by_id(layout, "notes").placeholder == "missing.key"
        assert _by_id(layout, "li-static").children == "static"

    def test_title_updates_app(self, engine, app):
        engine.translate(language="es")
        assert app.title == "Monitor"
        assert engine.document.title == "Monitor"

    def test_language_tags(self, engine):
        engine.translate(language="en")
        layout = engine.document.layout
        assert getattr(_by_id(layout, "heading"), "data-i18n-lang") == "en"
        assert getattr(_by_id(layout, "li-static"), "data-i18n-lang", None) is None

    def test_stats_counts_bound_components(self, engine):
        assert engine.stats().element_count == 5
