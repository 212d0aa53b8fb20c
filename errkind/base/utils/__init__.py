"""Small shared helpers for the base layer."""

from .rendering import Quoted, format_keyvals, quote, quote_if_needed

__all__ = ["Quoted", "format_keyvals", "quote", "quote_if_needed"]
