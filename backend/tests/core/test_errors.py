"""Error Hierarchy — codes, statuses, and failure classification."""

from minisite.core.errors import (
    FATAL_ERROR, INTERNAL_ERROR, ErrorCategory, MethodNotAllowedError,
    PageNotFoundError, SiteError, classify_failure,
)


def test_method_not_allowed_envelope():
    exc = MethodNotAllowedError("POST", "/api/time")
    assert isinstance(exc, SiteError)
    assert exc.http_status == 405
    assert exc.category is ErrorCategory.CLIENT
    assert exc.to_response() == {"error": "method_not_allowed"}


def test_page_not_found_keeps_path():
    exc = PageNotFoundError("/missing")
    assert exc.http_status == 404
    assert exc.path == "/missing"
    assert exc.to_response() == {"error": "not_found"}


def test_ordinary_exceptions_are_internal():
    assert classify_failure(ValueError("x")) == INTERNAL_ERROR
    assert classify_failure(RuntimeError("x")) == INTERNAL_ERROR


def test_interpreter_failures_are_fatal():
    assert classify_failure(MemoryError()) == FATAL_ERROR
    assert classify_failure(RecursionError()) == FATAL_ERROR
    assert classify_failure(SystemError()) == FATAL_ERROR
