"""KeyEventFilter — routes Qt key events of the editor to an IKeyListener."""

from __future__ import annotations

from PyQt5.QtCore import QEvent, QObject, Qt

from azswitch.handlers.translator import IKeyListener


# Shortcuts (Ctrl+C, Alt+F4, ...) reach the editor untranslated
SHORTCUT_MODIFIERS = Qt.ControlModifier | Qt.AltModifier | Qt.MetaModifier

# Case state keys are tracked whatever modifiers are held
STATE_KEYS = (Qt.Key_Shift, Qt.Key_CapsLock)

# Keypad keys share codes with main-block keys but have no translation
KEYPAD_MODIFIER = Qt.KeypadModifier


class KeyEventFilter(QObject):
    """Event filter installed on the text editor.

    Every key press goes to ``key_pressed``; a press that would insert
    printable text is also offered to ``key_typed`` and swallowed when the
    listener consumes it.  Backspace, arrows, Enter and other non-printing
    keys keep their default editor behaviour.  Keypad presses are never
    looked up; their text is still offered to ``key_typed``.
    Releases are forwarded and never swallowed.
    """

    def __init__(self, listener: IKeyListener, parent: QObject | None = None):
        super().__init__(parent)
        self.listener = listener

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        etype = event.type()
        if etype == QEvent.KeyPress:
            return self._on_key_press(event)
        if etype == QEvent.KeyRelease:
            self.listener.key_released(event.key())
            return False
        return super().eventFilter(obj, event)

    def _on_key_press(self, event) -> bool:
        key = event.key()
        if event.modifiers() & SHORTCUT_MODIFIERS and key not in STATE_KEYS:
            return False

        if event.modifiers() & KEYPAD_MODIFIER and key not in STATE_KEYS:
            return self._consume_text(event)

        self.listener.key_pressed(key)
        return self._consume_text(event)

    def _consume_text(self, event) -> bool:
        text = event.text()
        if text and text.isprintable():
            return bool(self.listener.key_typed(text))
        return False
