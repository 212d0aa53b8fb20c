"""Base shared constants for error kinds and wrapping.

Central location to avoid scattering magic strings across the kinds and the
rendering helpers.
"""
from __future__ import annotations

# Characters that force a rendered condition code to be quoted
CODE_QUOTE_CHARS = "\n\r\t \"'"

# Characters that force a rendered context value to be quoted
VALUE_QUOTE_CHARS = CODE_QUOTE_CHARS + "="

# Rendered in place of the value when a context key has no partner
MISSING_VALUE = "MISSING"

# Context key used to record where ``not_implemented`` was called
CALLER_KEY = "caller"

__all__ = [
    "CODE_QUOTE_CHARS",
    "VALUE_QUOTE_CHARS",
    "MISSING_VALUE",
    "CALLER_KEY",
]
