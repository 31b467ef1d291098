"""Typed event definitions (dataclasses)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class EventType(Enum):
    # Lock / modifier state
    CAPS_LOCK_TOGGLED = auto()
    SHIFT_CHANGED = auto()
    # Translation results
    CHAR_TRANSLATED = auto()
    KEY_UNMAPPED = auto()


@dataclass
class Event:
    type: EventType
    data: Any
    timestamp: float


@dataclass
class TranslationEventData:
    key: int
    char: str
    position: int       # caret offset the char was inserted at
