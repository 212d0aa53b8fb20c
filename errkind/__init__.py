"""errkind package

Create and detect specific kinds of errors based on single-method
capabilities that the errors support.

Purpose:
    Attach machine-checkable facts to exceptions (temporary, condition code,
    status code, publicly disclosable) without a central error type or a
    registry. Any exception exposing the right method satisfies a kind,
    wherever it was constructed, and classification reads through any number
    of wrapping layers to the root cause.

Public API (re-exported):
    - Version: ``__version__``
    - Capabilities: ``HasCause``, ``SupportsTemporary``, ``HasCode``,
      ``HasStatusCode``, ``HasMessage``, ``SupportsPublicMessage``,
      ``SupportsPublicStatusCode``, ``SupportsPublicCode``
    - Kinds: ``Error``, ``ContextError``, ``StatusError``,
      ``PublicStatusError``, ``PublicStatusCodeError``, ``TemporaryError``
    - Wrapping: ``new``, ``wrap``, ``cause``, ``resolve_cause``
    - Classification: ``has_code``, ``code``, ``has_status_code``,
      ``status_code``, ``status`` (deprecated), ``is_temporary``,
      ``has_public_message``, ``has_public_status_code``, ``has_public_code``
    - Constructors: ``public``, ``public_with_code``, ``bad_request``,
      ``unauthorized``, ``forbidden``, ``not_found``, ``not_implemented``,
      ``temporary``
    - Disclosure: ``PublicErrorPayload``, ``public_payload``
    - Logging: ``get_logger``, ``configure_logger``, ``log_event``,
      ``log_error``, ``LogContext``
"""

from .base.capabilities import (
    HasCause,
    HasCode,
    HasMessage,
    HasStatusCode,
    SupportsPublicCode,
    SupportsPublicMessage,
    SupportsPublicStatusCode,
    SupportsTemporary,
)
from .base.causes import resolve_cause
from .base.classification import (
    code,
    has_code,
    has_public_code,
    has_public_message,
    has_public_status_code,
    has_status_code,
    is_temporary,
    status,
    status_code,
)
from .base.constructors import (
    bad_request,
    forbidden,
    not_found,
    not_implemented,
    public,
    public_with_code,
    temporary,
    unauthorized,
)
from .base.disclosure import PublicErrorPayload, public_payload
from .base.errors import (
    ContextError,
    Error,
    PublicStatusCodeError,
    PublicStatusError,
    StatusError,
    TemporaryError,
)
from .base.logging import LogContext, configure_logger, get_logger, log_error, log_event
from .base.wrapping import cause, new, wrap

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Capabilities
    "HasCause",
    "SupportsTemporary",
    "HasCode",
    "HasStatusCode",
    "HasMessage",
    "SupportsPublicMessage",
    "SupportsPublicStatusCode",
    "SupportsPublicCode",
    # Kinds
    "Error",
    "ContextError",
    "StatusError",
    "PublicStatusError",
    "PublicStatusCodeError",
    "TemporaryError",
    # Wrapping
    "new",
    "wrap",
    "cause",
    "resolve_cause",
    # Classification
    "has_code",
    "code",
    "has_status_code",
    "status_code",
    "status",
    "is_temporary",
    "has_public_message",
    "has_public_status_code",
    "has_public_code",
    # Constructors
    "public",
    "public_with_code",
    "bad_request",
    "unauthorized",
    "forbidden",
    "not_found",
    "not_implemented",
    "temporary",
    # Disclosure
    "PublicErrorPayload",
    "public_payload",
    # Logging
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "log_error",
]
