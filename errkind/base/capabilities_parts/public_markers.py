"""
Public disclosure marker Protocols.

Each marker states that one piece of an error is safe to show to a requesting
client: its message, its status code or its condition code. The methods carry
no information; satisfying the shape is the declaration.

Markers are deliberately not inherited by wrappers. Wrapping an error to add
key/value context yields a new error that satisfies none of these, because
the context may contain implementation details. Resolve the cause first when
the question is "is the underlying reason public".

External dependencies: None.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SupportsPublicMessage(Protocol):
    """Marker for errors whose message contains no implementation details."""

    def public_message(self) -> None:  # pragma: no cover - structural
        """Marker method; the return value is meaningless."""


@runtime_checkable
class SupportsPublicStatusCode(Protocol):
    """Marker for errors whose status code can be returned to a client."""

    def public_status_code(self) -> None:  # pragma: no cover - structural
        """Marker method; the return value is meaningless."""


@runtime_checkable
class SupportsPublicCode(Protocol):
    """Marker for errors whose condition code can be returned to a client."""

    def public_code(self) -> None:  # pragma: no cover - structural
        """Marker method; the return value is meaningless."""


__all__ = ["SupportsPublicMessage", "SupportsPublicStatusCode", "SupportsPublicCode"]
