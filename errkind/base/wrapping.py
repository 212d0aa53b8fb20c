"""
Generic error wrapping primitives.

Small building blocks used by the error kinds and by callers that want to add
context to an error without affecting its classification:

* :func:`new` creates a message-only error;
* :func:`wrap` records an error as the cause of a new one, with an optional
  message prefix;
* :func:`cause` resolves the root cause;
* ``ContextError.with_context`` attaches ordered key/value pairs.

Example
-------
``wrap(not_found(), "load user").with_context("id", 42)`` renders as
``load user id=42: not found`` and still reports status 404.
"""
from __future__ import annotations

from typing import Optional

from .causes import resolve_cause
from .errors_parts.context_error import ContextError


def _join(parts: tuple[str, ...]) -> Optional[str]:
    words = [p.strip() for p in parts if p and p.strip()]
    return " ".join(words) or None


def new(message: str) -> ContextError:
    """Return a new error with ``message`` and no cause."""
    return ContextError(message)


def wrap(err: Optional[BaseException], *message: str) -> Optional[ContextError]:
    """Return a new error whose cause is ``err``; ``None`` when ``err`` is ``None``.

    Message fragments are trimmed, blanks dropped and the rest joined with a
    single space. The returned wrapper does not satisfy any classification or
    public capability of ``err``.
    """
    if err is None:
        return None
    return ContextError(_join(message), err)


def cause(err: Optional[BaseException]) -> Optional[BaseException]:
    """Alias of :func:`resolve_cause`."""
    return resolve_cause(err)


__all__ = ["new", "wrap", "cause", "ContextError"]
