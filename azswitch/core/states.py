"""Keyboard case state: Caps Lock and Shift flags."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class InputState:
    caps_lock_on: bool = False
    shift_on: bool = False

    @property
    def is_upper_case(self) -> bool:
        """True when exactly one of Caps Lock / Shift is active."""
        return self.caps_lock_on != self.shift_on

    def toggle_caps_lock(self) -> bool:
        """Invert Caps Lock and return the new value."""
        self.caps_lock_on = not self.caps_lock_on
        return self.caps_lock_on

    def press_shift(self) -> None:
        self.shift_on = True

    def release_shift(self) -> None:
        self.shift_on = False
