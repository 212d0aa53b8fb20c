"""HasMessage Protocol (single-class module).

Some kinds render extra detail into ``str(err)`` (for example an appended
``code=...`` token). This capability exposes the bare message on its own.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HasMessage(Protocol):
    """Structural contract for errors exposing their bare message text."""

    def message(self) -> str:  # pragma: no cover - interface
        """Message text without any rendered decorations."""
        ...


__all__ = ["HasMessage"]
