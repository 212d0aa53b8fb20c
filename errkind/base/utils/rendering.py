"""
Text rendering helpers for error messages.

Purpose
-------
Render condition codes and key/value context into error text in a stable,
grep-friendly ``key=value`` form. Values that would be ambiguous when split
on whitespace are double-quoted with JSON escaping.

External dependencies: None (stdlib ``json`` only).
"""
from __future__ import annotations

import json
from typing import Any, Sequence

from ..constants import MISSING_VALUE, VALUE_QUOTE_CHARS


class Quoted(str):
    """String context value that is always rendered double-quoted."""

    __slots__ = ()


def quote(text: str) -> str:
    """Return ``text`` double-quoted with backslash escapes."""
    return json.dumps(text, ensure_ascii=False)


def quote_if_needed(text: str, chars: str = VALUE_QUOTE_CHARS) -> str:
    """Quote ``text`` when it is empty or contains any of ``chars``."""
    if text == "" or any(ch in text for ch in chars):
        return quote(text)
    return text


def format_keyvals(keyvals: Sequence[Any]) -> str:
    """Render an ordered key/value sequence as space separated ``k=v`` tokens.

    Keys and values are converted with ``str``; :class:`Quoted` values are
    always quoted, others only when ambiguous. A trailing key without a
    value is rendered as ``key=MISSING`` rather than rejected, since building
    an error must never itself fail.
    """
    tokens = []
    for i in range(0, len(keyvals), 2):
        key = str(keyvals[i])
        if i + 1 < len(keyvals):
            raw = keyvals[i + 1]
            value = quote(raw) if isinstance(raw, Quoted) else quote_if_needed(str(raw))
        else:
            value = MISSING_VALUE
        tokens.append(f"{key}={value}")
    return " ".join(tokens)


__all__ = ["Quoted", "quote", "quote_if_needed", "format_keyvals"]
