"""Status error kind.

Carries a message and a numeric status. The status is public (safe to return
to a requesting client) but the free-text message is not.
"""

from __future__ import annotations

from .error import Error


class StatusError(Error):
    """Error with a message and a status code.

    Satisfies ``HasStatusCode`` and ``SupportsPublicStatusCode``.
    """

    def __init__(self, message: str, status: int) -> None:
        super().__init__(message, status)
        self._message = message
        self._status = status

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._message!r}, {self._status!r})"

    def status_code(self) -> int:
        return self._status

    def public_status_code(self) -> None:
        """Marker: the status code can be returned to a client."""


__all__ = ["StatusError"]
