"""HasCause Protocol (single-class module).

Capability for errors that wrap another error. Cause-chain resolution loops
while this capability is present, so any third-party wrapper that exposes a
``cause()`` method participates without registration.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class HasCause(Protocol):
    """Structural contract for errors exposing the error they wrap."""

    def cause(self) -> Optional[BaseException]:  # pragma: no cover - interface
        """Return the wrapped error, or ``None`` at the end of the chain."""
        ...


__all__ = ["HasCause"]
