"""Pytest configuration for the errkind test suite.

Provides a fixture capturing the shared ``errkind`` logger output.
"""

from __future__ import annotations

import io
import logging
from typing import Iterator

import pytest

from errkind.base.log_support import JsonFormatter
from errkind.base.logging import get_logger


@pytest.fixture()
def log_stream(monkeypatch: pytest.MonkeyPatch) -> Iterator[io.StringIO]:
    """Route the shared ``errkind`` logger into a StringIO for the test.

    The handler is tagged as the managed console handler so ``get_logger``
    keeps using it instead of adding another.
    """

    monkeypatch.setenv("ERRKIND_LOG_LEVEL", "DEBUG")
    base = get_logger()
    previous_handlers = base.handlers[:]
    previous_level = base.level
    previous_json_mode = getattr(base, "_errkind_json_mode", True)

    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    handler.setLevel(logging.DEBUG)
    setattr(handler, "_errkind_console_handler", True)
    base.handlers[:] = [handler]
    base.setLevel(logging.DEBUG)
    setattr(base, "_errkind_json_mode", True)
    yield stream
    base.handlers[:] = previous_handlers
    base.setLevel(previous_level)
    setattr(base, "_errkind_json_mode", previous_json_mode)
