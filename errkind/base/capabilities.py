"""
Capability interfaces (Protocols) for error classification.

An error satisfies a capability by shape alone: exposing the single method
named by the Protocol is enough, no base class or registration is required.
This module re-exports the single-class modules under
``errkind.base.capabilities_parts`` to keep imports stable.

| Protocol                   | Method                  |
|----------------------------|-------------------------|
| ``HasCause``               | ``cause()``             |
| ``SupportsTemporary``      | ``temporary() -> bool`` |
| ``HasCode``                | ``code() -> str``       |
| ``HasStatusCode``          | ``status_code() -> int``|
| ``HasMessage``             | ``message() -> str``    |
| ``SupportsPublicMessage``  | ``public_message()``    |
| ``SupportsPublicStatusCode`` | ``public_status_code()`` |
| ``SupportsPublicCode``     | ``public_code()``       |
"""

from __future__ import annotations

from .capabilities_parts import (
    HasCause,
    HasCode,
    HasMessage,
    HasStatusCode,
    SupportsPublicCode,
    SupportsPublicMessage,
    SupportsPublicStatusCode,
    SupportsTemporary,
)

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
