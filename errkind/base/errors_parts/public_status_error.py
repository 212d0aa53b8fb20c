"""Public status error kind (single-class module)."""

from __future__ import annotations

from .status_error import StatusError


class PublicStatusError(StatusError):
    """Status error whose message is also safe to display to clients."""

    def public_message(self) -> None:
        """Marker: the message contains no implementation details."""


__all__ = ["PublicStatusError"]
