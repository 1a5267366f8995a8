"""Security Headers — the fixed header set applied to every response.

Invariants:
    - Same headers on every response: pages, redirects, JSON, plain text, errors
    - Applying twice never duplicates a header (existing values are replaced)
    - No configuration surface

Design Decisions:
    - Works on raw ASGI header lists so the middleware can apply it at
      http.response.start, after the handler and before any body bytes
"""

CONTENT_SECURITY_POLICY = "; ".join([
    "default-src 'self'",
    "script-src 'self'",
    "style-src 'self'",
    "img-src 'self' data:",
    "font-src 'self'",
    "connect-src 'self'",
    "object-src 'none'",
    "base-uri 'none'",
    "form-action 'self'",
    "frame-ancestors 'none'",
])

SECURITY_HEADERS: dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "no-referrer",
    "X-Frame-Options": "DENY",
    "Permissions-Policy": "camera=(), microphone=(), geolocation=(), payment=()",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Content-Security-Policy": CONTENT_SECURITY_POLICY,
}

_ENCODED = [
    (name.lower().encode("latin-1"), value.encode("latin-1"))
    for name, value in SECURITY_HEADERS.items()
]
_NAMES = {name for name, _ in _ENCODED}


def apply_security_headers(headers: list[tuple[bytes, bytes]]) -> None:
    """Replace/insert the security headers in a raw ASGI header list, in place."""
    headers[:] = [(k, v) for k, v in headers if k.lower() not in _NAMES]
    headers.extend(_ENCODED)
