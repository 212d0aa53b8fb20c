"""
Classification accessors answering capability questions about errors.

All accessors except the ``has_public_*`` family resolve the root cause first
and then perform a single structural check against a capability Protocol.
They never raise for ``None`` or for foreign errors that satisfy none of the
capabilities: absence is reported as a zero value (``""``, ``0``, ``False``).
Exceptions raised *inside* a capability method propagate unchanged.

The ``has_public_*`` checks inspect the given value directly. Callers resolve
the cause themselves when they want to know whether the underlying reason is
public, so that a wrapper carrying key/value context (which may contain
implementation details) is never mistaken for a public error::

    err = resolve_cause(err)
    if has_public_message(err):
        ...  # str(err) can be shown to the client
"""
from __future__ import annotations

import warnings
from typing import Optional

from .capabilities import (
    HasCode,
    HasStatusCode,
    SupportsPublicCode,
    SupportsPublicMessage,
    SupportsPublicStatusCode,
    SupportsTemporary,
)
from .causes import resolve_cause


def _satisfies(err: Optional[BaseException], capability: type, method: str) -> bool:
    """Return True when ``err`` matches ``capability`` with a callable ``method``.

    ``isinstance`` on a runtime Protocol only checks that the member exists;
    a data attribute of the same name (``HTTPError.code`` is an ``int``) is a
    miss, not a capability.
    """
    return err is not None and isinstance(err, capability) and callable(getattr(err, method, None))


def has_code(err: Optional[BaseException], *codes: str) -> bool:
    """Determine whether the error has any of ``codes`` (exact, case-sensitive)."""
    root = resolve_cause(err)
    if not _satisfies(root, HasCode, "code"):
        return False
    err_code = root.code()
    return any(err_code == c for c in codes)


def code(err: Optional[BaseException]) -> str:
    """Return the condition code associated with ``err``, or ``""`` if none."""
    root = resolve_cause(err)
    if _satisfies(root, HasCode, "code"):
        return root.code()
    return ""


def has_status_code(err: Optional[BaseException], *statuses: int) -> bool:
    """Determine whether the error has any of ``statuses``."""
    sc = status_code(err)
    return any(sc == s for s in statuses)


def status_code(err: Optional[BaseException]) -> int:
    """Return the status code associated with ``err``, or zero if none."""
    root = resolve_cause(err)
    if _satisfies(root, HasStatusCode, "status_code"):
        return root.status_code()
    return 0


def status(err: Optional[BaseException]) -> int:
    """Deprecated alias of :func:`status_code`."""
    warnings.warn("status() is deprecated; use status_code()", DeprecationWarning, stacklevel=2)
    return status_code(err)


def is_temporary(err: Optional[BaseException]) -> bool:
    """Return True for errors that may succeed if retried.

    The root cause must satisfy ``SupportsTemporary`` and its ``temporary()``
    method must return True.
    """
    root = resolve_cause(err)
    if _satisfies(root, SupportsTemporary, "temporary"):
        return bool(root.temporary())
    return False


def has_public_message(err: Optional[BaseException]) -> bool:
    """Return True if the message of ``err`` itself is safe for external clients.

    Does not resolve the cause; see the module docstring.
    """
    return _satisfies(err, SupportsPublicMessage, "public_message")


def has_public_status_code(err: Optional[BaseException]) -> bool:
    """Return True if the status code of ``err`` itself can be returned to a client."""
    return _satisfies(err, SupportsPublicStatusCode, "public_status_code")


def has_public_code(err: Optional[BaseException]) -> bool:
    """Return True if the condition code of ``err`` itself can be returned to a client."""
    return _satisfies(err, SupportsPublicCode, "public_code")


__all__ = [
    "has_code",
    "code",
    "has_status_code",
    "status_code",
    "status",
    "is_temporary",
    "has_public_message",
    "has_public_status_code",
    "has_public_code",
]
