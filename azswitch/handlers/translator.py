"""Translator: turns AZERTY key events into QWERTY characters.

The host delivers three notifications per physical key press, in order:
press, typed, release.  Presses of Caps Lock and Shift update the case
state; any other press is looked up in the translation table and, when
mapped, written into the text sink at the caret.  Typed notifications are
always consumed so the host never inserts the untranslated character.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

from PyQt5.QtCore import Qt

import azswitch.log  # registers TRACE level and logger.trace()
from azswitch.core.event_bus import EventBus
from azswitch.core.events import Event, EventType, TranslationEventData
from azswitch.core.keymap import normalize_key, translate
from azswitch.core.states import InputState
from azswitch.platform.text_sink import ITextSink

logger = logging.getLogger(__name__)


class IKeyListener(ABC):
    """Receiver of host key notifications."""

    @abstractmethod
    def key_pressed(self, key: int) -> Any:
        ...

    @abstractmethod
    def key_released(self, key: int) -> None:
        ...

    @abstractmethod
    def key_typed(self, text: str) -> bool:
        """Return True if the host must not insert *text* itself."""


class Translator(IKeyListener):
    """AZERTY → QWERTY key listener writing into an ITextSink."""

    def __init__(self, sink: ITextSink, state: InputState | None = None,
                 event_bus: EventBus | None = None):
        self.sink = sink
        self.state = state if state is not None else InputState()
        self.event_bus = event_bus

    def key_pressed(self, key: int) -> str | None:
        """Handle a key press.

        Returns the character written to the sink, or None when the press
        only changed the case state or the key has no translation.
        """
        logger.trace("press key=0x%x", key)  # type: ignore[attr-defined]

        if key == Qt.Key_CapsLock:
            caps = self.state.toggle_caps_lock()
            logger.debug("Caps Lock %s", "on" if caps else "off")
            self._publish(EventType.CAPS_LOCK_TOGGLED, caps)
            return None

        if key == Qt.Key_Shift:
            # auto-repeat keeps sending presses while Shift is held
            if not self.state.shift_on:
                self.state.press_shift()
                logger.debug("Shift down")
                self._publish(EventType.SHIFT_CHANGED, True)
            return None

        base_key = normalize_key(key)
        char = translate(base_key, self.state.is_upper_case)
        if char is None:
            logger.trace("Unmapped key 0x%x", key)  # type: ignore[attr-defined]
            self._publish(EventType.KEY_UNMAPPED, key)
            return None

        position = self.sink.caret_position()
        self.sink.insert(char, position)
        logger.debug("0x%x → %r at %d", base_key, char, position)
        self._publish(
            EventType.CHAR_TRANSLATED,
            TranslationEventData(key=base_key, char=char, position=position),
        )
        return char

    def key_released(self, key: int) -> None:
        logger.trace("release key=0x%x", key)  # type: ignore[attr-defined]
        if key == Qt.Key_Shift and self.state.shift_on:
            self.state.release_shift()
            logger.debug("Shift up")
            self._publish(EventType.SHIFT_CHANGED, False)

    def key_typed(self, text: str) -> bool:
        return True

    def _publish(self, event_type: EventType, data: Any) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(Event(type=event_type, data=data, timestamp=time.time()))
