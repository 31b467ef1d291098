from __future__ import annotations

import os

import pytest

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from azswitch.platform.text_sink import ITextSink


class FakeTextSink(ITextSink):
    """In-memory ITextSink with a movable caret.

    Like a real editor, the caret advances past inserted text.
    """

    def __init__(self, text: str = "", caret: int | None = None):
        self.text = text
        self.caret = len(text) if caret is None else caret
        self.inserts: list[tuple[str, int]] = []
        self.caret_reads = 0

    def caret_position(self) -> int:
        self.caret_reads += 1
        return self.caret

    def insert(self, text: str, position: int) -> None:
        self.inserts.append((text, position))
        self.text = self.text[:position] + text + self.text[position:]
        self.caret = position + len(text)


@pytest.fixture
def fake_sink() -> FakeTextSink:
    return FakeTextSink()


@pytest.fixture(scope="session")
def qapp():
    """Single offscreen QApplication shared by all widget tests."""
    from PyQt5.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def default_config() -> dict:
    from azswitch.config import DEFAULT_CONFIG

    cfg = dict(DEFAULT_CONFIG)
    cfg['caps_lock_at_start'] = 'off'
    return cfg
