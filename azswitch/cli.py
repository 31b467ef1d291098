#!/usr/bin/env python3
"""
AZSwitch CLI entry point: logging setup and GUI bootstrap
"""

from __future__ import annotations
import sys
import argparse
import signal
import os
import logging
import logging.handlers
import traceback
from pathlib import Path

from azswitch import __version__

# Global logger instance
logger = None


def setup_logging(debug: bool = False, log_file: str | None = None) -> logging.Logger:
    """Setup logging to both console and file

    Args:
        debug: Enable debug level logging
        log_file: Path to log file (default: ~/.azswitch.log)
    """
    global logger

    if logger is not None:
        return logger

    logger = logging.getLogger('azswitch')
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    if log_file is None:
        log_file = os.path.expanduser('~/.azswitch.log')

    fmt = logging.Formatter(
        '[%(asctime)s] %(levelname)-8s %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # File handler (rotate log file when it gets too large)
    try:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=10*1024*1024,  # 10 MB
            backupCount=5
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(fmt)
        logger.addHandler(file_handler)
    except OSError as e:
        print(f"Warning: Could not setup file logging: {e}", file=sys.stderr)

    # Console handler (warnings and errors only unless debugging)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    console_handler.setFormatter(fmt)
    logger.addHandler(console_handler)

    return logger


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='azswitch',
        description='Type QWERTY characters on an AZERTY keyboard',
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode with verbose logging'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to config file (default: ~/.config/azswitch/config.json)'
    )
    parser.add_argument(
        '--logfile',
        type=str,
        default=None,
        help='Path to log file (default: ~/.azswitch.log)'
    )
    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s ' + __version__
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for AZSwitch"""
    args = parse_args(argv)

    log = setup_logging(debug=args.debug, log_file=args.logfile)
    log.info(f"AZSwitch started (version {__version__}, PID {os.getpid()})")
    log.info(f"Debug mode: {args.debug}")

    # Import after args parsing to avoid import-time side effects
    from PyQt5.QtCore import QTimer
    from PyQt5.QtWidgets import QApplication
    from azswitch.config import load_config
    from azswitch.platform.lock_state import resolve_initial_caps_lock
    from azswitch.ui.translator_window import TranslatorWindow

    config = load_config(args.config, args.debug)
    if args.debug:
        config['debug'] = True

    caps_lock_on = resolve_initial_caps_lock(config['caps_lock_at_start'])

    app = QApplication.instance() or QApplication(sys.argv[:1])

    try:
        window = TranslatorWindow(config, caps_lock_on=caps_lock_on)
    except Exception as e:
        log.error(f"❌ Failed to create window: {e}")
        log.debug(traceback.format_exc())
        return 1

    def signal_handler(signum: int, frame) -> None:
        log.info(f"Received {signal.Signals(signum).name}, quitting")
        app.quit()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    # Python signal handlers only run while the interpreter holds control
    wakeup = QTimer()
    wakeup.timeout.connect(lambda: None)
    wakeup.start(250)

    window.show()
    log.info("Window shown, entering Qt event loop")
    try:
        rc = app.exec_()
    finally:
        wakeup.stop()
        log.info("AZSwitch shutdown")
    return rc


if __name__ == '__main__':
    sys.exit(main())
