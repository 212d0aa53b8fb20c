"""errkind.config.env
====================

Environment variable mapping for logging settings.

Variables
---------
``ERRKIND_LOG_LEVEL``
    Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL), case-insensitive.
``ERRKIND_LOG_JSON``
    ``1/true/yes/on`` for JSON lines, ``0/false/no/off`` for plain text.
``ERRKIND_LOG_FILE``
    Optional path of a rotating log file.

Failure Modes
-------------
Helpers never raise on unset or malformed variables; unknown values fall
back to the defaults in ``defaults.py``.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional

from .defaults import DEFAULT_LOG_JSON, DEFAULT_LOG_LEVEL

LOG_LEVEL_ENV = "ERRKIND_LOG_LEVEL"
LOG_JSON_ENV = "ERRKIND_LOG_JSON"
LOG_FILE_ENV = "ERRKIND_LOG_FILE"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def parse_level(value: Optional[str], default: int = DEFAULT_LOG_LEVEL) -> int:
    """Parse a logging level name into its integer constant.

    Falls back to ``default`` on empty or unknown values.
    """
    if not value:
        return default
    return _LEVELS.get(value.strip().upper(), default)


def parse_bool(value: Optional[str], default: bool) -> bool:
    if value is None:
        return default
    v = value.strip().lower()
    if v in _TRUTHY:
        return True
    if v in _FALSY:
        return False
    return default


def get_logging_config(overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Return merged logging settings.

    Merge order (later wins): defaults -> env vars -> overrides. ``None``
    override values are ignored.

    Returns
    -------
    dict
        Keys ``level`` (int), ``json_mode`` (bool) and ``file_path`` (str | None).
    """
    cfg: Dict[str, Any] = {
        "level": DEFAULT_LOG_LEVEL,
        "json_mode": DEFAULT_LOG_JSON,
        "file_path": None,
    }
    cfg["level"] = parse_level(os.getenv(LOG_LEVEL_ENV), default=cfg["level"])
    cfg["json_mode"] = parse_bool(os.getenv(LOG_JSON_ENV), default=cfg["json_mode"])
    if file_path := (os.getenv(LOG_FILE_ENV) or "").strip():
        cfg["file_path"] = file_path
    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


__all__ = [
    "LOG_LEVEL_ENV",
    "LOG_JSON_ENV",
    "LOG_FILE_ENV",
    "parse_level",
    "parse_bool",
    "get_logging_config",
]
