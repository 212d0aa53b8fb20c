"""
Wrapping error carrying an optional message and key/value context.

A ``ContextError`` records a prior error as its cause, optionally adding a
message prefix and ordered key/value pairs. It satisfies ``HasCause`` and
nothing else: wrapping never propagates classification or public markers,
those are read from the root cause.

Rendering
---------
- with message: ``"<message> k=v ...: <cause>"`` (the cause part only when
  there is a cause);
- without message: ``"<cause> k=v ..."``.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

from ..utils.rendering import format_keyvals
from .error import Error


class ContextError(Error):
    """Immutable wrapper error; see module docstring for rendering rules."""

    def __init__(
        self,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
        keyvals: Sequence[Any] = (),
    ) -> None:
        keyvals = tuple(keyvals)
        super().__init__(message, cause, keyvals)
        self._message = message or None
        self._cause = cause
        self._keyvals: Tuple[Any, ...] = keyvals
        # keep tracebacks informative when the wrapper is raised
        self.__cause__ = cause

    def cause(self) -> Optional[BaseException]:
        return self._cause

    def keyvals(self) -> Tuple[Any, ...]:
        """Return the attached key/value pairs in insertion order."""
        return self._keyvals

    def with_context(self, *keyvals: Any) -> "ContextError":
        """Return a copy of this wrapper with ``keyvals`` appended.

        The copy shares message and cause with the receiver, so repeated calls
        extend a single context section instead of nesting wrappers.
        """
        return ContextError(self._message, self._cause, self._keyvals + keyvals)

    def __str__(self) -> str:
        context = format_keyvals(self._keyvals)
        if self._message:
            head = f"{self._message} {context}" if context else self._message
            if self._cause is None:
                return head
            return f"{head}: {self._cause}"
        body = "" if self._cause is None else str(self._cause)
        if context:
            return f"{body} {context}" if body else context
        return body

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


__all__ = ["ContextError"]
