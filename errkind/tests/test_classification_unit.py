from __future__ import annotations

import pytest

from errkind import (
    bad_request,
    code,
    forbidden,
    has_code,
    has_public_code,
    has_public_message,
    has_public_status_code,
    has_status_code,
    is_temporary,
    new,
    not_found,
    public,
    public_with_code,
    resolve_cause,
    status,
    status_code,
    temporary,
    unauthorized,
    wrap,
)

from foreign_errors import ForeignCodedError, ForeignStatusError, ForeignWrapper


@pytest.mark.parametrize(
    "err, codes, want, want_code",
    [
        (None, ("A", "B", "C"), False, ""),
        (public_with_code("test error", 0, "CODE"), ("A", "B", "C"), False, "CODE"),
        (public_with_code("test error", 0, "CODE").with_context("a", "b"), ("A", "B", "C"), False, "CODE"),
        (public_with_code("test error", 0, "").with_context("a", "b"), ("A", "B", "C"), False, ""),
        (public_with_code("test error", 0, "CODE"), ("A", "B", "CODE"), True, "CODE"),
        (public_with_code("test error", 0, "CODE").with_context("a", "b"), ("A", "B", "CODE"), True, "CODE"),
        (new("test error").with_context("a", "b"), ("A", "B", "C"), False, ""),
    ],
)
def test_code(err, codes, want, want_code):
    assert has_code(err, *codes) is want
    assert code(err) == want_code
    if want:
        root = resolve_cause(err)
        assert has_public_message(root)
        assert has_public_code(root)


def test_has_code_is_case_sensitive_and_needs_candidates():
    err = public_with_code("m", 400, "Code")
    assert not has_code(err, "CODE", "code")
    assert not has_code(err)
    assert has_code(err, "Code")


@pytest.mark.parametrize(
    "err, statuses, want, want_status, want_public_message, want_public_status",
    [
        (None, (500,), False, 0, False, False),
        (public("test error", 501), (400, 401, 402), False, 501, True, True),
        (public_with_code("test error", 501, "CODE").with_context("a", "b"), (400, 401, 402), False, 501, True, True),
        (public("test error", 501), (500, 501), True, 501, True, True),
        (public_with_code("test error", 400, "CODE").with_context("a", "b"), (400,), True, 400, True, True),
        (ForeignStatusError(501), (400, 401, 402), False, 501, False, False),
        (ForeignStatusError(402), (400, 401, 402), True, 402, False, False),
        (bad_request(), (400,), True, 400, False, True),
        (unauthorized(), (401,), True, 401, False, True),
        (forbidden(), (403,), True, 403, False, True),
        (not_found(), (404,), True, 404, False, True),
        (new("no status"), (400,), False, 0, False, False),
    ],
)
def test_status_code(err, statuses, want, want_status, want_public_message, want_public_status):
    assert has_status_code(err, *statuses) is want
    assert status_code(err) == want_status
    root = resolve_cause(err)
    assert has_public_message(root) is want_public_message
    assert has_public_status_code(root) is want_public_status


def test_has_status_code_empty_candidates_is_false():
    assert not has_status_code(public("x", 400))


def test_status_is_deprecated_alias():
    with pytest.deprecated_call():
        assert status(not_found()) == 404


@pytest.mark.parametrize(
    "err, want, want_error",
    [
        (None, False, None),
        (temporary("temp"), True, "temp"),
        (wrap(temporary("temp"), "wrapped").with_context("a", "b"), True, "wrapped a=b: temp"),
        (new("not temporary"), False, "not temporary"),
        (wrap(new("not temporary"), "wrapped"), False, "wrapped: not temporary"),
    ],
)
def test_temporary(err, want, want_error):
    assert is_temporary(err) is want
    if err is not None:
        assert str(err) == want_error


def test_temporary_requires_true_result():
    assert is_temporary(ForeignCodedError("Throttling", retryable=True))
    assert not is_temporary(ForeignCodedError("ValidationError", retryable=False))
    assert not is_temporary(ValueError("plain"))


def test_foreign_errors_classify_through_foreign_wrappers():
    err = ForeignWrapper(wrap(ForeignCodedError("Throttling", retryable=True), "call api"))
    assert code(err) == "Throttling"
    assert has_code(err, "Throttling")
    assert is_temporary(err)
    assert status_code(err) == 0


def test_non_callable_member_is_not_a_capability():
    class AttrCodeError(Exception):
        code = 404
        status_code = 404
        temporary = True

    err = AttrCodeError("attribute shaped")
    assert code(err) == ""
    assert status_code(err) == 0
    assert not is_temporary(err)


def test_builtin_exceptions_report_zero_values():
    err = KeyError("missing")
    assert code(err) == ""
    assert status_code(err) == 0
    assert not is_temporary(err)
    assert not has_public_message(err)


def test_nil_errors_report_zero_values():
    assert not has_code(None, "A")
    assert code(None) == ""
    assert status_code(None) == 0
    assert not is_temporary(None)
    assert not has_public_message(None)
    assert not has_public_status_code(None)
    assert not has_public_code(None)


def test_capability_method_errors_propagate():
    class Broken(Exception):
        def status_code(self) -> int:
            raise RuntimeError("broken accessor")

    with pytest.raises(RuntimeError, match="broken accessor"):
        status_code(Broken())
