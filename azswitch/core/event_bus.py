"""EventBus — pub/sub between the translator and the window."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Callable

from azswitch.core.events import Event, EventType

logger = logging.getLogger(__name__)


class EventBus:
    """Lightweight synchronous pub/sub bus."""

    def __init__(self):
        self._handlers: dict[EventType, list[Callable[[Event], None]]] = defaultdict(list)

    def subscribe(self, event_type: EventType, handler: Callable[[Event], None]) -> None:
        """Register a handler for an event type."""
        self._handlers[event_type].append(handler)

    def publish(self, event: Event) -> None:
        """Dispatch *event* to its handlers in subscription order.

        A failing handler is logged and does not stop the others.
        """
        for handler in list(self._handlers.get(event.type, [])):
            try:
                handler(event)
            except Exception:
                logger.exception("EventBus handler error for %s", event.type)
