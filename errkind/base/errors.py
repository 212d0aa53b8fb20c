"""Concrete error kinds public surface.

This module re-exports the one-class-per-file implementations under
``errkind.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error import Error
from .errors_parts.context_error import ContextError
from .errors_parts.status_error import StatusError
from .errors_parts.public_status_error import PublicStatusError
from .errors_parts.public_status_code_error import PublicStatusCodeError
from .errors_parts.temporary_error import TemporaryError

__all__ = [
    "Error",
    "ContextError",
    "StatusError",
    "PublicStatusError",
    "PublicStatusCodeError",
    "TemporaryError",
]
