"""Configuration loader and validator for AZSwitch.

Provides ``load_config(path)`` which reads a JSON config (tolerating
comments and trailing commas) and merges it over ``DEFAULT_CONFIG``.
Without an explicit path ``~/.config/azswitch/config.json`` is used.

``validate_config(conf)`` normalizes and validates config keys, raising
``ValueError`` on invalid values.  Key mappings are fixed and are not part
of the configuration.
"""

from __future__ import annotations

import json
import logging
import os
import re

from azswitch.platform.lock_state import CAPS_LOCK_SETTINGS

logger = logging.getLogger(__name__)

USER_CONFIG_PATH = '~/.config/azswitch/config.json'

# Single source of truth for default configuration
DEFAULT_CONFIG: dict = {
    'debug': False,
    'line_wrap': True,
    'window_width': 450,
    'window_height': 300,
    'font_size': 0,
    'caps_lock_at_start': 'auto',
}


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _sanitize_json_text(s: str) -> str:
    """Remove ``#``/``//`` comments and trailing commas from JSON-like text."""
    # Hash-style line comments
    s = re.sub(r"^[ \t]*#.*$", "", s, flags=re.MULTILINE)
    # C++-style line comments
    s = re.sub(r"//.*$", "", s, flags=re.MULTILINE)
    # Trailing commas before } or ]
    s = re.sub(r",[ \t\r\n]+(\}|\])", r"\1", s)
    return s


def _validate_bool(conf: dict, key: str) -> bool:
    value = conf.get(key, DEFAULT_CONFIG[key])
    if not isinstance(value, bool):
        raise ValueError(f"Invalid '{key}': must be boolean")
    return value


def _validate_int(conf: dict, key: str, low: int, high: int) -> int:
    raw = conf.get(key, DEFAULT_CONFIG[key])
    if isinstance(raw, bool):
        raise ValueError(f"Invalid '{key}': {raw}")
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid '{key}': {raw}")
    if not (low <= value <= high):
        raise ValueError(f"Invalid '{key}': {raw} (must be between {low} and {high})")
    return value


# ------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------

def validate_config(conf: dict | None) -> dict:
    """Validate and normalize configuration dictionary.

    Returns a normalized dict with all expected keys.
    Raises ``ValueError`` on invalid values.
    """
    if conf is None:
        conf = {}

    out = dict(DEFAULT_CONFIG)

    out['debug'] = _validate_bool(conf, 'debug')
    out['line_wrap'] = _validate_bool(conf, 'line_wrap')
    out['window_width'] = _validate_int(conf, 'window_width', 100, 10000)
    out['window_height'] = _validate_int(conf, 'window_height', 100, 10000)

    # font_size — 0 keeps the platform default
    fs = _validate_int(conf, 'font_size', 0, 72)
    if 0 < fs < 6:
        raise ValueError(f"Invalid 'font_size': {fs} (must be 0 or between 6 and 72)")
    out['font_size'] = fs

    cls = conf.get('caps_lock_at_start', DEFAULT_CONFIG['caps_lock_at_start'])
    if cls not in CAPS_LOCK_SETTINGS:
        raise ValueError(
            f"Invalid 'caps_lock_at_start': {cls!r} (must be one of {', '.join(CAPS_LOCK_SETTINGS)})"
        )
    out['caps_lock_at_start'] = cls

    return out


def _read_and_merge(path: str, target_config: dict, debug: bool = False) -> bool:
    """Read a JSON file, validate, and merge into *target_config*.

    Returns True on success, False on any error.
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except OSError as exc:
        if debug:
            logger.warning("Cannot read config %s: %s", path, exc)
        return False

    try:
        cfg = json.loads(raw)
    except json.JSONDecodeError:
        try:
            cfg = json.loads(_sanitize_json_text(raw))
        except json.JSONDecodeError as exc:
            if debug:
                logger.warning("JSON parse error in %s: %s", path, exc)
            return False

    if not isinstance(cfg, dict):
        if debug:
            logger.warning("Invalid config %s: top level must be an object", path)
        return False

    try:
        validated = validate_config(cfg)
    except ValueError as verr:
        if debug:
            logger.warning("Invalid config %s: %s", path, verr)
        return False

    # Only override keys explicitly present in source
    for k in cfg:
        if k in validated:
            target_config[k] = validated[k]
        else:
            logger.debug("Ignoring unknown config key %r in %s", k, path)
    return True


# ------------------------------------------------------------------
# Top-level loader
# ------------------------------------------------------------------

def load_config(config_path: str | None = None, debug: bool = False) -> dict:
    """Load and merge configuration.

    If *config_path* is given, uses only that file (returns defaults if
    the file does not exist).  Otherwise falls back to
    ``~/.config/azswitch/config.json``.

    Returns the effective configuration dict (always has all default keys).
    """
    config = dict(DEFAULT_CONFIG)
    path = config_path if config_path is not None else os.path.expanduser(USER_CONFIG_PATH)

    if os.path.exists(path):
        if _read_and_merge(path, config, debug=debug):
            logger.debug("Config loaded from %s", path)
    elif config_path is not None:
        logger.debug("Config file %s not found, using defaults", path)

    return config
