"""Base structured logging utilities for errkind.

Rationale:
- Central place to configure consistent JSON (or plain) logging.
- Avoid ad-hoc logger setup in callers that classify errors.

The classification core performs no logging. :func:`log_error` is offered to
callers that want a single structured line describing how an error was
classified (status, code, temporary, public) before acting on it.
"""
from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional

from ..config.defaults import DEFAULT_LOGGER_NAME, DEFAULT_LOG_LEVEL
from ..config.env import LOG_LEVEL_ENV, get_logging_config, parse_level
from .causes import resolve_cause
from .classification import code, has_public_message, is_temporary, status_code
from .log_support import JsonFormatter, LogContext

_BASE_LOGGER_ATTR = "_errkind_logger_initialized"
_CONSOLE_HANDLER_ATTR = "_errkind_console_handler"
_FILE_HANDLER_ATTR = "_errkind_file_handler"
_JSON_MODE_ATTR = "_errkind_json_mode"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _formatter(json_mode: bool) -> logging.Formatter:
    return JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT)


def _set_console_format(logger: logging.Logger, json_mode: bool) -> None:
    for existing in logger.handlers:
        if not getattr(existing, _CONSOLE_HANDLER_ATTR, False):
            continue
        if json_mode != isinstance(existing.formatter, JsonFormatter):
            existing.setFormatter(_formatter(json_mode))
    setattr(logger, _JSON_MODE_ATTR, json_mode)


def _ensure_base_logger(json_mode: Optional[bool] = None, level: Optional[int] = None) -> logging.Logger:
    """Initialize and return the shared ``errkind`` logger.

    The first call installs the stderr handler using ``level``/``json_mode``
    (``ERRKIND_LOG_LEVEL`` and ``ERRKIND_LOG_JSON`` win over, or stand in
    for, those arguments). Later calls keep whatever is configured and only
    apply the arguments that are not ``None``.
    """

    logger = logging.getLogger(DEFAULT_LOGGER_NAME)
    if getattr(logger, _BASE_LOGGER_ATTR, False):
        if level is not None:
            desired_level = parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
            logger.setLevel(desired_level)
            for existing in logger.handlers:
                if getattr(existing, _CONSOLE_HANDLER_ATTR, False):
                    existing.setLevel(desired_level)
        if json_mode is not None:
            _set_console_format(logger, json_mode)
        return logger

    cfg = get_logging_config()
    desired_level = parse_level(os.getenv(LOG_LEVEL_ENV), default=DEFAULT_LOG_LEVEL if level is None else level)
    desired_json = cfg["json_mode"] if json_mode is None else json_mode
    logger.setLevel(desired_level)
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired_level)
    handler.setFormatter(_formatter(desired_json))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.handlers[:] = [handler]
    logger.propagate = False
    setattr(logger, _JSON_MODE_ATTR, desired_json)
    setattr(logger, _BASE_LOGGER_ATTR, True)
    return logger


def get_logger(
    name: str = DEFAULT_LOGGER_NAME,
    json_mode: Optional[bool] = None,
    level: Optional[int] = None,
) -> logging.Logger:
    """Return a logger attached to the shared ``errkind`` handler.

    The base logger is configured once (stderr handler, JSON by default).
    Afterwards the configuration set by :func:`configure_logger` sticks:
    ``json_mode`` and ``level`` change it only when passed explicitly, and
    ``ERRKIND_LOG_LEVEL`` still overrides an explicit ``level``. Child
    loggers carry no handler of their own and propagate to the base logger.
    """
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == DEFAULT_LOGGER_NAME:
        return base_logger

    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        if getattr(handler, _CONSOLE_HANDLER_ATTR, False):
            logger.removeHandler(handler)
            with contextlib.suppress(Exception):
                handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def configure_logger(
    *,
    level: int | str | None = None,
    file_path: Optional[str] = None,
    json_mode: Optional[bool] = None,
) -> logging.Logger:
    """Reconfigure the shared ``errkind`` logger at runtime.

    Settings applied here persist across later :func:`get_logger` calls.

    Parameters
    ----------
    level: int | str | None
        Desired level, numeric or by name. ``None`` keeps the configured level.
    file_path: Optional[str]
        When provided, a managed rotating file handler writes to this path
        (replacing any previous managed file handler). When ``None``, the
        ``ERRKIND_LOG_FILE`` setting applies; if that is unset too, managed
        file handlers are removed.
    json_mode: Optional[bool]
        Formatter for the console and managed file handlers; ``None`` keeps
        the current mode.

    Notes
    -----
    Handlers not created by this module are left untouched.
    """
    cfg = get_logging_config({"file_path": file_path})
    logger = _ensure_base_logger()
    if json_mode is not None:
        _set_console_format(logger, json_mode)
    mode = getattr(logger, _JSON_MODE_ATTR, cfg["json_mode"])

    if level is not None:
        if isinstance(level, str):
            logger.setLevel(parse_level(level, default=logger.level))
        else:
            logger.setLevel(level)
        for h in logger.handlers:
            h.setLevel(logger.level)

    managed = [h for h in logger.handlers if getattr(h, _FILE_HANDLER_ATTR, False)]
    target = cfg["file_path"]
    abs_path = os.path.abspath(os.path.expanduser(target)) if target else None

    for h in managed:
        if abs_path is not None and getattr(h, "baseFilename", None) == abs_path:
            h.setFormatter(_formatter(mode))
            h.setLevel(logger.level)
            continue
        logger.removeHandler(h)
        with contextlib.suppress(Exception):
            h.close()

    if abs_path is None or any(getattr(h, "baseFilename", None) == abs_path for h in logger.handlers):
        return logger

    os.makedirs(os.path.dirname(abs_path), exist_ok=True)
    fh = RotatingFileHandler(abs_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8")
    setattr(fh, _FILE_HANDLER_ATTR, True)
    fh.setLevel(logger.level)
    fh.setFormatter(_formatter(mode))
    logger.addHandler(fh)
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: LogContext | None = None,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Emit a structured log event as a single JSON payload.

    Keys whose values are ``None`` are dropped to keep logs concise.
    """
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload |= ctx.to_dict()
    payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


def log_error(
    logger: logging.Logger,
    err: Optional[BaseException],
    event: str = "error.classified",
    ctx: LogContext | None = None,
    *,
    level: int = logging.WARNING,
    **fields: Any,
) -> None:
    """Log the classification of ``err`` as a structured event.

    Emitted keys: ``error`` (full text, wrappers included), ``error_type``
    (type name of the root cause), ``status``, ``code``, ``temporary`` and
    ``public`` (whether the root cause's message is public). Zero values for
    ``status`` and ``code`` are omitted. Nothing is logged for ``None``.
    """
    if err is None:
        return
    root = resolve_cause(err)
    log_event(
        logger,
        event,
        ctx,
        level=level,
        error=str(err),
        error_type=type(root).__name__,
        status=status_code(err) or None,
        code=code(err) or None,
        temporary=is_temporary(err),
        public=has_public_message(root),
        **fields,
    )


__all__ = [
    "LogContext",
    "get_logger",
    "configure_logger",
    "log_event",
    "log_error",
]
