"""Request Path — canonical path and method extraction from raw request data.

Invariants:
    - normalize_path() never returns an empty string, query string, or fragment
    - canonical_redirect() returns None for "/" and for any path without a trailing slash
    - A redirect target always starts with exactly one "/" (never "//host": protocol-relative)
    - normalize_method() always returns an uppercase token

Design Decisions:
    - Pure functions over a Request wrapper: the middleware works on raw ASGI scope
"""

from urllib.parse import urlsplit


def normalize_path(raw_target: str | None) -> str:
    """Extract the path component of a request target.

    Accepts origin-form ("/a?b#c") and absolute-form ("http://h/a?b")
    targets. Missing or empty paths become "/".
    """
    if not raw_target:
        return "/"
    if "://" in raw_target.split("?", 1)[0]:
        path = urlsplit(raw_target).path
    else:
        # urlsplit would read "//host" as a netloc
        path = raw_target.split("#", 1)[0].split("?", 1)[0]
    return path or "/"


def canonical_redirect(path: str) -> str | None:
    """Slash-free form of a non-root path ending in "/", or None if canonical."""
    if path == "/" or not path.endswith("/"):
        return None
    return "/" + path.strip("/")


def normalize_method(method: str | None) -> str:
    method = (method or "").strip().upper()
    return method or "GET"
