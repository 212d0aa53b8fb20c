"""HasCode Protocol (single-class module).

Errors that report an application-specific condition code. Several SDKs
follow this convention (an error exposing a ``code()`` accessor), which is
what makes code-based checks useful for foreign errors.

Note that an object with a plain ``code`` *attribute* (e.g. ``HTTPError.code``
holding an ``int``) passes a bare ``isinstance`` check; the classification
accessors additionally require the member to be callable.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HasCode(Protocol):
    """Structural contract for errors exposing a string condition code."""

    def code(self) -> str:  # pragma: no cover - interface
        """Machine-readable error condition code."""
        ...


__all__ = ["HasCode"]
