"""
Public error payloads.

Purpose
-------
Build the subset of an error that is safe to return to a requesting client,
driven entirely by the public marker capabilities of the root cause:

- the message is disclosed only when the cause is ``SupportsPublicMessage``;
- the status only when the cause is ``SupportsPublicStatusCode``;
- the code only when the cause is ``SupportsPublicCode``.

Wrapper text and key/value context never appear in the payload.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for the payload DTO (``.model_dump()`` /
  ``.model_dump_json()`` for the response body).
"""
from __future__ import annotations

from http import HTTPStatus
from typing import Optional

from pydantic import BaseModel, ConfigDict

from ..config.defaults import DEFAULT_DISCLOSURE_MESSAGE, DEFAULT_DISCLOSURE_STATUS
from .capabilities import HasMessage
from .causes import resolve_cause
from .classification import (
    code,
    has_public_code,
    has_public_message,
    has_public_status_code,
    status_code,
)


class PublicErrorPayload(BaseModel):
    """Client-facing description of an error.

    Attributes:
        message: Text safe to display to the client.
        status: Status code to respond with.
        code: Condition code, present only when the error discloses one.
    """

    model_config = ConfigDict(frozen=True)

    message: str
    status: int
    code: Optional[str] = None


def _reason(status: int) -> str:
    try:
        return HTTPStatus(status).phrase.lower()
    except ValueError:
        return DEFAULT_DISCLOSURE_MESSAGE


def public_payload(
    err: Optional[BaseException],
    *,
    default_status: int = DEFAULT_DISCLOSURE_STATUS,
    default_message: Optional[str] = None,
) -> PublicErrorPayload:
    """Return the client-safe payload for ``err``.

    Parameters
    ----------
    err:
        Any error, wrapped or not; ``None`` yields the default payload.
    default_status:
        Status used when the root cause discloses none (or discloses zero).
    default_message:
        Message used when the root cause's message is not public. When
        omitted, the standard reason phrase of the disclosed status is used.
    """
    root = resolve_cause(err)

    disclosed_status = status_code(root) if has_public_status_code(root) else 0
    disclosed_status = disclosed_status or default_status

    if has_public_message(root):
        if isinstance(root, HasMessage) and callable(root.message):
            message = root.message()
        else:
            message = str(root)
    elif default_message is not None:
        message = default_message
    else:
        message = _reason(disclosed_status)

    disclosed_code = code(root) if has_public_code(root) else ""
    return PublicErrorPayload(message=message, status=disclosed_status, code=disclosed_code or None)


__all__ = ["PublicErrorPayload", "public_payload"]
