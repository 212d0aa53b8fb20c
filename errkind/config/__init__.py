"""Configuration layer for errkind.

Public API
----------
* ``get_logging_config(overrides=None) -> dict``
* default constants from ``errkind.config.defaults``
"""
from __future__ import annotations

from .defaults import (
    DEFAULT_DISCLOSURE_MESSAGE,
    DEFAULT_DISCLOSURE_STATUS,
    DEFAULT_LOG_JSON,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOGGER_NAME,
    DEFAULT_MESSAGES,
)
from .env import get_logging_config, parse_bool, parse_level

__all__ = [
    "get_logging_config",
    "parse_level",
    "parse_bool",
    "DEFAULT_MESSAGES",
    "DEFAULT_DISCLOSURE_STATUS",
    "DEFAULT_DISCLOSURE_MESSAGE",
    "DEFAULT_LOGGER_NAME",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_LOG_JSON",
]
