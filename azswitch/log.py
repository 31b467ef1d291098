"""Extra TRACE logging level for AZSwitch.

Levels (ascending):
    TRACE =  5  — every raw key event, every unmapped key
    DEBUG = 10  — Caps Lock / Shift changes, translated characters
    INFO  = 20  — startup/shutdown (default)

Import ``azswitch.log`` once before calling ``logger.trace(...)``.
"""

import logging

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")


def _trace(self: logging.Logger, message: object, *args: object, **kwargs: object) -> None:
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kwargs)  # type: ignore[attr-defined]


logging.Logger.trace = _trace  # type: ignore[attr-defined]
