"""Header Map — case-insensitive, last-wins, sorted display."""

from minisite.core.header_map import HeaderMap, display_name


def test_lookup_ignores_case():
    headers = HeaderMap([("X-Test", "hello")])
    assert headers["x-test"] == "hello"
    assert headers["X-TEST"] == "hello"
    assert "x-Test" in headers


def test_duplicate_names_keep_last_value():
    headers = HeaderMap([("x-request-id", "first"), ("X-Request-Id", "second")])
    assert headers["x-request-id"] == "second"
    assert len(headers) == 1


def test_accepts_asgi_byte_pairs():
    headers = HeaderMap([(b"accept", b"application/json")])
    assert headers.get("Accept") == "application/json"


def test_missing_header_get_returns_none():
    assert HeaderMap().get("x-request-id") is None
    assert 42 not in HeaderMap([("a", "b")])


def test_display_names_are_title_case():
    assert display_name("x-request-id") == "X-Request-Id"
    assert display_name("HOST") == "Host"
    assert list(HeaderMap([(b"user-agent", b"t")])) == ["User-Agent"]


def test_sorted_items_by_name():
    headers = HeaderMap([("zeta", "1"), ("Accept", "2"), ("host", "3")])
    assert headers.sorted_items() == [
        ("Accept", "2"), ("Host", "3"), ("Zeta", "1"),
    ]
