"""Security Headers — fixed set, applied in place, never duplicated."""

from minisite.core.security_headers import SECURITY_HEADERS, apply_security_headers


def _as_dict(headers):
    return {k.decode(): v.decode() for k, v in headers}


def test_all_headers_added():
    headers = [(b"content-type", b"text/html")]
    apply_security_headers(headers)
    applied = _as_dict(headers)
    assert applied["content-type"] == "text/html"
    for name, value in SECURITY_HEADERS.items():
        assert applied[name.lower()] == value


def test_expected_policy_values():
    assert SECURITY_HEADERS["X-Content-Type-Options"] == "nosniff"
    assert SECURITY_HEADERS["X-Frame-Options"] == "DENY"
    assert "frame-ancestors 'none'" in SECURITY_HEADERS["Content-Security-Policy"]
    assert "default-src 'self'" in SECURITY_HEADERS["Content-Security-Policy"]


def test_existing_values_are_replaced_not_duplicated():
    headers = [(b"X-Frame-Options", b"SAMEORIGIN")]
    apply_security_headers(headers)
    apply_security_headers(headers)
    frame = [v for k, v in headers if k.lower() == b"x-frame-options"]
    assert frame == [b"DENY"]
    assert len(headers) == len(SECURITY_HEADERS)
