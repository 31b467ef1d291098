"""Text sink: where translated characters are written."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt5.QtWidgets import QPlainTextEdit


class ITextSink(ABC):
    """Editing surface that accepts single-character insertions."""

    @abstractmethod
    def caret_position(self) -> int:
        """Current caret offset into the sink's text."""

    @abstractmethod
    def insert(self, text: str, position: int) -> None:
        """Insert *text* at *position*."""


class QtTextSink(ITextSink):
    """ITextSink over a QPlainTextEdit.

    After an insert the editor's caret sits right after the new text, the
    same as if the user had typed it.
    """

    def __init__(self, editor: QPlainTextEdit) -> None:
        self.editor = editor

    def caret_position(self) -> int:
        return self.editor.textCursor().position()

    def insert(self, text: str, position: int) -> None:
        cursor = self.editor.textCursor()
        # characterCount() includes the trailing paragraph separator
        last = self.editor.document().characterCount() - 1
        cursor.setPosition(max(0, min(position, last)))
        cursor.insertText(text)
        self.editor.setTextCursor(cursor)
        self.editor.ensureCursorVisible()
