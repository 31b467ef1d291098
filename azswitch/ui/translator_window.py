"""TranslatorWindow — main window with the translating text area."""

from __future__ import annotations

from PyQt5.QtCore import Qt
from PyQt5.QtWidgets import QLabel, QMainWindow, QPlainTextEdit

from azswitch.core.event_bus import EventBus
from azswitch.core.events import Event, EventType
from azswitch.core.states import InputState
from azswitch.handlers.translator import Translator
from azswitch.i18n import t
from azswitch.platform.text_sink import QtTextSink
from azswitch.ui.key_filter import KeyEventFilter


class TranslatorWindow(QMainWindow):
    """Plain-text editor whose key presses are translated AZERTY → QWERTY.

    The status bar shows Caps Lock / Shift state and the last character
    written, driven by the translator's EventBus events.
    """

    def __init__(self, config: dict, caps_lock_on: bool = False,
                 event_bus: EventBus | None = None, parent=None):
        super().__init__(parent)
        self.config = config
        self.event_bus = event_bus if event_bus is not None else EventBus()

        self.editor = QPlainTextEdit(self)
        self.sink = QtTextSink(self.editor)
        self.translator = Translator(
            self.sink, InputState(caps_lock_on=caps_lock_on), self.event_bus
        )
        self.key_filter = KeyEventFilter(self.translator, self)

        self._build_ui()
        self._subscribe_events()
        self._refresh_indicators()

    # -- UI construction ---------------------------------------------------

    def _build_ui(self) -> None:
        self.setWindowTitle(t('window_title'))
        self.setGeometry(100, 100, self.config['window_width'], self.config['window_height'])

        self.editor.setLineWrapMode(
            QPlainTextEdit.WidgetWidth if self.config['line_wrap'] else QPlainTextEdit.NoWrap
        )
        if self.config['font_size']:
            font = self.editor.font()
            font.setPointSize(self.config['font_size'])
            self.editor.setFont(font)
        # Dead keys must arrive as plain key presses, not composed IM text
        self.editor.setAttribute(Qt.WA_InputMethodEnabled, False)
        self.editor.installEventFilter(self.key_filter)
        self.setCentralWidget(self.editor)

        self._caps_label = QLabel()
        self._shift_label = QLabel()
        self._last_label = QLabel(t('last_char_none'))
        status = self.statusBar()
        status.addWidget(self._caps_label)
        status.addWidget(self._shift_label)
        status.addPermanentWidget(self._last_label)

    def _subscribe_events(self) -> None:
        self.event_bus.subscribe(EventType.CAPS_LOCK_TOGGLED, self._on_state_event)
        self.event_bus.subscribe(EventType.SHIFT_CHANGED, self._on_state_event)
        self.event_bus.subscribe(EventType.CHAR_TRANSLATED, self._on_char_translated)

    # -- event handlers ----------------------------------------------------

    def _on_state_event(self, event: Event) -> None:
        self._refresh_indicators()

    def _on_char_translated(self, event: Event) -> None:
        char = event.data.char
        shown = t('space') if char == ' ' else char
        self._last_label.setText(t('last_char', char=shown))

    def _refresh_indicators(self) -> None:
        state = self.translator.state
        self._caps_label.setText(t('caps_on') if state.caps_lock_on else t('caps_off'))
        self._shift_label.setText(t('shift_on') if state.shift_on else t('shift_off'))
