from __future__ import annotations

import logging

from errkind.config import DEFAULT_MESSAGES, get_logging_config, parse_bool, parse_level


def test_defaults_without_env(monkeypatch):
    for name in ("ERRKIND_LOG_LEVEL", "ERRKIND_LOG_JSON", "ERRKIND_LOG_FILE"):
        monkeypatch.delenv(name, raising=False)
    cfg = get_logging_config()
    assert cfg == {"level": logging.INFO, "json_mode": True, "file_path": None}


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ERRKIND_LOG_LEVEL", "warn")
    monkeypatch.setenv("ERRKIND_LOG_JSON", "off")
    monkeypatch.setenv("ERRKIND_LOG_FILE", " /tmp/errkind.log ")
    cfg = get_logging_config()
    assert cfg["level"] == logging.WARNING
    assert cfg["json_mode"] is False
    assert cfg["file_path"] == "/tmp/errkind.log"


def test_explicit_overrides_win_and_none_is_ignored(monkeypatch):
    monkeypatch.setenv("ERRKIND_LOG_LEVEL", "ERROR")
    cfg = get_logging_config({"level": logging.DEBUG, "json_mode": None})
    assert cfg["level"] == logging.DEBUG
    assert cfg["json_mode"] is True


def test_malformed_values_fall_back(monkeypatch):
    monkeypatch.setenv("ERRKIND_LOG_LEVEL", "LOUD")
    monkeypatch.setenv("ERRKIND_LOG_JSON", "maybe")
    cfg = get_logging_config()
    assert cfg["level"] == logging.INFO
    assert cfg["json_mode"] is True


def test_parse_helpers():
    assert parse_level(None) == logging.INFO
    assert parse_level(" debug ") == logging.DEBUG
    assert parse_level("nope", default=logging.ERROR) == logging.ERROR
    assert parse_bool("YES", default=False) is True
    assert parse_bool(None, default=True) is True


def test_default_messages_cover_standard_statuses():
    assert DEFAULT_MESSAGES[400] == "bad request"
    assert DEFAULT_MESSAGES[501] == "not implemented"
