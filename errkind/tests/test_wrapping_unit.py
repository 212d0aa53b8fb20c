"""Unit coverage for wrapping primitives and cause-chain resolution."""

from __future__ import annotations

import pytest

from errkind import ContextError, cause, new, not_found, resolve_cause, status_code, wrap
from errkind.base.utils.rendering import Quoted, format_keyvals, quote_if_needed

from foreign_errors import ForeignStatusError, ForeignWrapper


def test_new_has_no_cause():
    err = new("boom")
    assert isinstance(err, ContextError)
    assert err.cause() is None
    assert resolve_cause(err) is err
    assert str(err) == "boom"


def test_wrap_none_is_none():
    assert wrap(None) is None
    assert wrap(None, "context") is None


@pytest.mark.parametrize(
    "build, want",
    [
        (lambda: wrap(new("root")), "root"),
        (lambda: wrap(new("root"), "outer"), "outer: root"),
        (lambda: wrap(new("root"), " outer ", "", "more"), "outer more: root"),
        (lambda: wrap(new("root")).with_context("k", "v"), "root k=v"),
        (lambda: wrap(new("root"), "outer").with_context("k", "v", "n", 2), "outer k=v n=2: root"),
        (lambda: new("solo").with_context("k", "v"), "solo k=v"),
        (lambda: wrap(new("root"), "outer").with_context("k", "v").with_context("x", "y"), "outer k=v x=y: root"),
    ],
)
def test_context_error_rendering(build, want):
    assert str(build()) == want


def test_with_context_returns_copy_sharing_cause():
    base = wrap(new("root"), "outer")
    annotated = base.with_context("k", "v")
    assert annotated is not base
    assert base.keyvals() == ()
    assert annotated.keyvals() == ("k", "v")
    assert annotated.cause() is base.cause()


@pytest.mark.parametrize(
    "keyvals, want",
    [
        ((), ""),
        (("a", "b"), "a=b"),
        (("a", "two words"), 'a="two words"'),
        (("a", ""), 'a=""'),
        (("a", "x=y"), 'a="x=y"'),
        (("n", 3, "flag", True), "n=3 flag=True"),
        (("orphan",), "orphan=MISSING"),
    ],
)
def test_format_keyvals(keyvals, want):
    assert format_keyvals(keyvals) == want


def test_quote_if_needed_escapes_control_characters():
    assert quote_if_needed("line\nbreak") == '"line\\nbreak"'
    assert quote_if_needed("plain") == "plain"


def test_quoted_values_always_render_quoted():
    assert format_keyvals(("caller", Quoted("handlers.py:42"))) == 'caller="handlers.py:42"'
    assert format_keyvals(("caller", "handlers.py:42")) == "caller=handlers.py:42"
    assert str(new("boom").with_context("at", Quoted("x"))) == 'boom at="x"'


def test_resolve_cause_walks_every_layer():
    root = not_found()
    err = wrap(wrap(wrap(root, "a"), "b").with_context("k", 1), "c")
    assert resolve_cause(err) is root
    assert cause(err) is root
    assert resolve_cause(None) is None


def test_resolve_cause_follows_foreign_wrappers():
    root = ForeignStatusError(418)
    err = wrap(ForeignWrapper(wrap(root, "inner")), "outer")
    assert resolve_cause(err) is root
    assert status_code(err) == 418


def test_implicit_exception_chaining_is_not_followed():
    try:
        try:
            raise KeyError("user_id")
        except KeyError as exc:
            raise not_found("no such user") from exc
    except Exception as caught:  # noqa: BLE001 - inspecting the raised error
        err = caught
    assert resolve_cause(err) is err
    assert status_code(err) == 404


def test_raised_wrapper_keeps_traceback_cause():
    root = new("root")
    with pytest.raises(ContextError) as info:
        raise wrap(root, "outer")
    assert info.value.__cause__ is root
