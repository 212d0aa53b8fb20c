"""Capability Protocols split into single-class modules.

This package provides one Protocol per file (the three public markers share
a module) while ``errkind.base.capabilities`` re-exports a stable API.
"""

from .has_cause import HasCause
from .supports_temporary import SupportsTemporary
from .has_code import HasCode
from .has_status_code import HasStatusCode
from .has_message import HasMessage
from .public_markers import SupportsPublicCode, SupportsPublicMessage, SupportsPublicStatusCode

__all__ = [
    "HasCause",
    "SupportsTemporary",
    "HasCode",
    "HasStatusCode",
    "HasMessage",
    "SupportsPublicMessage",
    "SupportsPublicStatusCode",
    "SupportsPublicCode",
]
