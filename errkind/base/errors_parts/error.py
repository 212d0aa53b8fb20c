"""Common base class for errors that accept key/value context.

Kept isolated to satisfy one-class-per-file policy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .context_error import ContextError


class Error(Exception):
    """Base for errors produced by this package.

    Every subclass supports :meth:`with_context`, which attaches ordered
    key/value pairs by returning a *new* wrapping error. The receiver is
    never modified.
    """

    def with_context(self, *keyvals: Any) -> "ContextError":
        """Return a new error whose cause is ``self`` carrying ``keyvals``."""
        from .context_error import ContextError

        return ContextError(None, self, keyvals)


__all__ = ["Error"]
