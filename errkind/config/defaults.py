"""
Centralized defaults for errkind.

Holds the default messages used by the standard-status constructors, the
fallback status used when an error discloses none, and logging defaults.
Values here are plain constants; environment handling lives in ``env.py``.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Dict

# Default messages for the standard-status constructors
DEFAULT_MESSAGES: Dict[int, str] = {
    HTTPStatus.BAD_REQUEST: "bad request",
    HTTPStatus.UNAUTHORIZED: "unauthorized",
    HTTPStatus.FORBIDDEN: "forbidden",
    HTTPStatus.NOT_FOUND: "not found",
    HTTPStatus.NOT_IMPLEMENTED: "not implemented",
}

# Status disclosed for errors that carry no public status
DEFAULT_DISCLOSURE_STATUS = int(HTTPStatus.INTERNAL_SERVER_ERROR)
DEFAULT_DISCLOSURE_MESSAGE = "internal server error"

# Logging
DEFAULT_LOGGER_NAME = "errkind"
DEFAULT_LOG_LEVEL = logging.INFO
DEFAULT_LOG_JSON = True

__all__ = [
    "DEFAULT_MESSAGES",
    "DEFAULT_DISCLOSURE_STATUS",
    "DEFAULT_DISCLOSURE_MESSAGE",
    "DEFAULT_LOGGER_NAME",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_LOG_JSON",
]
