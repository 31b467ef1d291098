"""Tests for QtTextSink over a real QPlainTextEdit."""

from __future__ import annotations

import pytest
from PyQt5.QtGui import QTextCursor
from PyQt5.QtWidgets import QPlainTextEdit

from azswitch.platform.text_sink import ITextSink, QtTextSink


@pytest.fixture
def editor(qapp):
    widget = QPlainTextEdit()
    yield widget
    widget.deleteLater()


def _move_caret(editor, position):
    cursor = editor.textCursor()
    cursor.setPosition(position)
    editor.setTextCursor(cursor)


def test_is_text_sink(editor):
    assert isinstance(QtTextSink(editor), ITextSink)


def test_empty_editor_caret_at_zero(editor):
    assert QtTextSink(editor).caret_position() == 0


def test_insert_into_empty_editor(editor):
    sink = QtTextSink(editor)
    sink.insert("q", 0)
    assert editor.toPlainText() == "q"
    assert sink.caret_position() == 1


def test_insert_in_middle_moves_caret_after_char(editor):
    editor.setPlainText("abcd")
    sink = QtTextSink(editor)
    sink.insert("X", 2)
    assert editor.toPlainText() == "abXcd"
    assert sink.caret_position() == 3


def test_caret_position_follows_user_moves(editor):
    editor.setPlainText("hello")
    sink = QtTextSink(editor)
    _move_caret(editor, 1)
    assert sink.caret_position() == 1
    _move_caret(editor, 4)
    assert sink.caret_position() == 4


def test_position_past_end_is_clamped(editor):
    editor.setPlainText("ab")
    sink = QtTextSink(editor)
    sink.insert("c", 99)
    assert editor.toPlainText() == "abc"


def test_insert_does_not_replace_selection(editor):
    editor.setPlainText("abcd")
    cursor = editor.textCursor()
    cursor.setPosition(0)
    cursor.setPosition(4, QTextCursor.KeepAnchor)
    editor.setTextCursor(cursor)
    sink = QtTextSink(editor)
    sink.insert("z", sink.caret_position())
    assert editor.toPlainText() == "abcdz"
