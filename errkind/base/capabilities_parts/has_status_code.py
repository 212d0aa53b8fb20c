"""HasStatusCode Protocol (single-class module)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HasStatusCode(Protocol):
    """Structural contract for errors exposing an integer (HTTP-like) status."""

    def status_code(self) -> int:  # pragma: no cover - interface
        """Numeric status associated with the error."""
        ...


__all__ = ["HasStatusCode"]
