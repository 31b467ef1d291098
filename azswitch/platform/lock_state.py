"""Caps Lock state of the host keyboard, read once at startup.

Uses the core X11 keyboard control request (python-xlib).  Without an X
server (or XWayland) the state cannot be read and Caps Lock is assumed off.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from Xlib import display as xdisplay

logger = logging.getLogger(__name__)

# LED 1 of the core keyboard is Caps Lock on every X server we know of
CAPS_LOCK_LED_MASK = 0x01

CAPS_LOCK_SETTINGS = ('auto', 'on', 'off')


def query_caps_lock(display_factory: Callable[[], Any] | None = None) -> bool:
    """Return True if Caps Lock is currently on, False if off or unknown."""
    factory = display_factory or xdisplay.Display
    try:
        dpy = factory()
    except Exception as e:
        logger.warning("Cannot open X display to read Caps Lock state: %s", e)
        return False

    try:
        led_mask = dpy.get_keyboard_control().led_mask
    except Exception as e:
        logger.warning("Cannot read keyboard LED state: %s", e)
        return False
    finally:
        dpy.close()

    caps = bool(led_mask & CAPS_LOCK_LED_MASK)
    logger.debug("Caps Lock at startup: %s (led_mask=0x%x)", caps, led_mask)
    return caps


def resolve_initial_caps_lock(setting: str = 'auto',
                              probe: Callable[[], bool] = query_caps_lock) -> bool:
    """Map the ``caps_lock_at_start`` config value to a Caps Lock flag."""
    if setting == 'on':
        return True
    if setting == 'off':
        return False
    if setting == 'auto':
        return probe()
    raise ValueError(f"Invalid caps lock setting: {setting!r}")
