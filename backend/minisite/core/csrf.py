"""CSRF Guard — per-session token issue and constant-time verification.

Invariants:
    - ensure_token() is idempotent: the first token issued lives for the whole session
    - verify_token() is False when either side is missing or empty
    - Comparison is constant-time (hmac.compare_digest) over UTF-8 bytes
"""

import hmac
import secrets

from minisite.core.domain_types import CsrfToken
from minisite.core.session_state import SessionData

TOKEN_BYTES = 32


def ensure_token(session: SessionData) -> CsrfToken:
    """Return the session token, creating it on first use."""
    if not session.csrf_token:
        session.csrf_token = CsrfToken(secrets.token_hex(TOKEN_BYTES))
    return session.csrf_token


def verify_token(session: SessionData, submitted: str | None) -> bool:
    expected = session.csrf_token
    if not expected or not submitted:
        return False
    # bytes: compare_digest rejects non-ASCII str
    return hmac.compare_digest(
        expected.encode("utf-8"), submitted.encode("utf-8"),
    )
