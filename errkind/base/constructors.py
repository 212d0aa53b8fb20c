"""
Constructors for the standard error kinds.

Each constructor returns a value satisfying a fixed subset of the capability
Protocols:

=====================  ======  =========================================
constructor            status  capabilities
=====================  ======  =========================================
``public``             given   status, public message, public status
``public_with_code``   given   + code, public code (when code is non-blank)
``bad_request``        400     status, public status
``unauthorized``       401     status, public status
``forbidden``          403     status, public status
``not_found``          404     status, public status
``not_implemented``    501     status (wrapped with caller context)
``temporary``          -       temporary (wrapped)
=====================  ======  =========================================

The standard-status constructors expose their status but not their message:
the message may be supplied by the caller and is treated as internal detail.
"""
from __future__ import annotations

import os
import sys
from http import HTTPStatus
from typing import Sequence, Union

from ..config.defaults import DEFAULT_MESSAGES
from .constants import CALLER_KEY
from .errors_parts.context_error import ContextError
from .errors_parts.public_status_code_error import PublicStatusCodeError
from .errors_parts.public_status_error import PublicStatusError
from .errors_parts.status_error import StatusError
from .errors_parts.temporary_error import TemporaryError
from .utils.rendering import Quoted
from .wrapping import wrap


def make_message(default: str, msgs: Sequence[str]) -> str:
    """Return a message built from ``default`` and optional overrides.

    Overrides are trimmed and blank ones discarded. If any remain they are
    joined with a single space (usually there is just one); otherwise
    ``default`` is returned.
    """
    messages = [m.strip() for m in msgs if m and m.strip()]
    if not messages:
        return default
    return " ".join(messages)


def public(message: str, status: int) -> PublicStatusError:
    """Return an error with ``message`` and ``status``, both safe for clients.

    The message must not contain implementation details. Attaching key/value
    pairs with ``with_context`` returns a new error that is not public; its
    cause still is.
    """
    return PublicStatusError(message, status)


def public_with_code(message: str, status: int, code: str) -> Union[PublicStatusCodeError, PublicStatusError]:
    """Return a public error carrying ``message``, ``status`` and ``code``.

    The code is trimmed; when nothing remains the result is the same as
    :func:`public` (no code, no ``code=`` token in the text).
    """
    code = (code or "").strip()
    if not code:
        return public(message, status)
    return PublicStatusCodeError(message, status, code)


def _status_error(status: HTTPStatus, msgs: Sequence[str]) -> StatusError:
    return StatusError(make_message(DEFAULT_MESSAGES[status], msgs), int(status))


def bad_request(*msgs: str) -> StatusError:
    """Return a client error with status 400 (bad request)."""
    return _status_error(HTTPStatus.BAD_REQUEST, msgs)


def unauthorized(*msgs: str) -> StatusError:
    """Return a client error with status 401 (unauthorized)."""
    return _status_error(HTTPStatus.UNAUTHORIZED, msgs)


def forbidden(*msgs: str) -> StatusError:
    """Return an error with status 403 (forbidden)."""
    return _status_error(HTTPStatus.FORBIDDEN, msgs)


def not_found(*msgs: str) -> StatusError:
    """Return an error with status 404 (not found)."""
    return _status_error(HTTPStatus.NOT_FOUND, msgs)


def not_implemented(*msgs: str) -> ContextError:
    """Return an error with status 501 (not implemented).

    The error is annotated with a ``caller`` key naming the calling source
    file and line, e.g. ``not implemented caller="handlers.py:42"``.
    """
    frame = sys._getframe(1)
    caller = f"{os.path.basename(frame.f_code.co_filename)}:{frame.f_lineno}"
    return _status_error(HTTPStatus.NOT_IMPLEMENTED, msgs).with_context(CALLER_KEY, Quoted(caller))


def temporary(message: str) -> ContextError:
    """Return an error that indicates it is temporary.

    The kind is wrapped so every constructor hands back the package's common
    error type; ``is_temporary`` resolves through the wrapper.
    """
    return wrap(TemporaryError(message))


__all__ = [
    "make_message",
    "public",
    "public_with_code",
    "bad_request",
    "unauthorized",
    "forbidden",
    "not_found",
    "not_implemented",
    "temporary",
]
