"""
Public status + code error kind.

Carries a message, a status and a non-empty condition code, all three safe
to return to a requesting client. The rendered text appends the code as a
``code=...`` token; :meth:`PublicStatusCodeError.message` returns the message
on its own.

Construct through ``public_with_code``, which normalizes a blank code away.
"""

from __future__ import annotations

from ..constants import CODE_QUOTE_CHARS
from ..utils.rendering import quote_if_needed
from .error import Error


class PublicStatusCodeError(Error):
    """Error with message, status and code.

    Satisfies ``HasStatusCode``, ``HasCode``, ``HasMessage`` and all three
    public markers.
    """

    def __init__(self, message: str, status: int, code: str) -> None:
        super().__init__(message, status, code)
        self._message = message
        self._status = status
        self._code = code

    def __str__(self) -> str:
        return f"{self._message} code={quote_if_needed(self._code, CODE_QUOTE_CHARS)}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._message!r}, {self._status!r}, {self._code!r})"

    def message(self) -> str:
        return self._message

    def status_code(self) -> int:
        return self._status

    def code(self) -> str:
        return self._code

    def public_message(self) -> None:
        """Marker: the message contains no implementation details."""

    def public_status_code(self) -> None:
        """Marker: the status code can be returned to a client."""

    def public_code(self) -> None:
        """Marker: the condition code can be returned to a client."""


__all__ = ["PublicStatusCodeError"]
