"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the lingobind test suite.
"""
import os

import httpx
import pytest

# Use a process-local SQLite database for tests
os.environ.setdefault("STORAGE_PATH", ":memory:")
os.environ.setdefault("DEFAULT_LANG", "es")


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_000_000_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, hours: float = 0, ms: int = 0) -> None:
        self.now += int(hours * 3600 * 1000) + ms


class RecordingTransport(httpx.MockTransport):
    """MockTransport that answers from a queue of responses and counts calls."""

    def __init__(self, *responses: httpx.Response | Exception):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []
        super().__init__(self._handle)

    def queue(self, *responses: httpx.Response | Exception) -> None:
        self.responses.extend(responses)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self.responses:
            return httpx.Response(500, json={"error": "no response queued"})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def sample_dataset() -> dict:
    return {
        "es": {
            "nav": {"overview": "Resumen", "alerts": "Alertas"},
            "forms": {"search": "Buscar..."},
            "title": "Monitor",
            "msg": "Hola",
        },
        "en": {
            "nav": {"overview": "Overview", "alerts": "Alerts"},
            "forms": {"search": "Search..."},
            "title": "Monitor",
        },
    }


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def storage():
    from lingobind.data.store import MemoryStorage

    return MemoryStorage()


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def client(transport) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=transport)


@pytest.fixture
def document():
    from lingobind.dom.element import MarkupDocument, MarkupElement

    return MarkupDocument(
        title="untitled",
        body=[
            MarkupElement("title", {"data-i18n-key": "title"}),
            MarkupElement(
                "nav",
                children=[
                    MarkupElement("a", {"data-i18n-key": "nav.overview"}),
                    MarkupElement("a", {"data-i18n-key": "nav.alerts", "data-i18n-lang": "fr"}),
                ],
            ),
            MarkupElement("input", {"data-i18n-key": "forms.search"}),
            MarkupElement("p", {"class": "static"}, text="untouched"),
        ],
    )
