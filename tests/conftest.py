"""Shared fixtures for the OpenPasteView test suite."""

import pytest

from openpasteview.config import reset_settings
from openpasteview.models.line_record import LineRecord


class FakeClipboard:
    """ClipboardWriter stand-in that remembers everything written to it."""

    def __init__(self):
        self.values = []

    def set_text(self, value):
        self.values.append(value)

    @property
    def text(self):
        return self.values[-1] if self.values else ""


@pytest.fixture
def clipboard():
    return FakeClipboard()


@pytest.fixture
def records():
    return [
        LineRecord(id="007", amount=30000),
        LineRecord(id="1002", amount=2000),
        LineRecord(id="1003", amount=500),
    ]


@pytest.fixture
def clean_settings(monkeypatch):
    """Isolate settings from the developer's environment and the cache."""
    for key in (
        "OPENPASTEVIEW_LOG_LEVEL",
        "OPENPASTEVIEW_LOG_DIR",
        "OPENPASTEVIEW_WINDOW_WIDTH",
        "OPENPASTEVIEW_WINDOW_HEIGHT",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setattr("openpasteview.config.load_dotenv", lambda *a, **kw: False)
    reset_settings()
    yield
    reset_settings()
