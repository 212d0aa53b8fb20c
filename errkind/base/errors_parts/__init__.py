"""Errors parts package public surface.

Re-exports individual error kinds for optional direct imports.
Prefer importing from `errkind.base.errors` for the stable surface.
"""

from .error import Error
from .context_error import ContextError
from .status_error import StatusError
from .public_status_error import PublicStatusError
from .public_status_code_error import PublicStatusCodeError
from .temporary_error import TemporaryError

__all__ = [
    "Error",
    "ContextError",
    "StatusError",
    "PublicStatusError",
    "PublicStatusCodeError",
    "TemporaryError",
]
