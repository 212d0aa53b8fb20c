"""Temporary error kind.

Defines ``TemporaryError``, a plain message error that always reports itself
as temporary. Kept isolated to satisfy one-class-per-file policy.
"""

from __future__ import annotations

from .error import Error


class TemporaryError(Error):
    """Raised for conditions that may succeed if retried."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self._message = message

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._message!r})"

    def temporary(self) -> bool:
        return True


__all__ = ["TemporaryError"]
