"""SupportsTemporary Protocol (single-class module).

Errors that report whether the failed operation may succeed if retried.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SupportsTemporary(Protocol):
    """Capability for errors that communicate whether they are temporary."""

    def temporary(self) -> bool:  # pragma: no cover - interface
        """Return True if the condition is transient and the call can be retried."""
        ...


__all__ = ["SupportsTemporary"]
