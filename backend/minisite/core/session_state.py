"""Session State — per-session server-side record for the contact form.

Invariants:
    - csrf_token is set at most once per session and never rotated
    - flash holds at most one pending message; take_flash() empties it
    - last_seen only moves forward (touched on every lookup)

Design Decisions:
    - Dataclass with no IO: pure, deterministic, testable without mocks
    - Storage and locking live in infrastructure/session_store.py
"""

from dataclasses import dataclass

from minisite.core.domain_types import CsrfToken, Flash


@dataclass
class SessionData:
    """Per-session state — pure dataclass, no IO."""

    # Per-session CSRF token (None until the first /contact visit)
    csrf_token: CsrfToken | None = None

    # One-shot message set by POST /contact, consumed by the next GET
    flash: Flash | None = None

    # Monotonic timestamp of the last lookup (idle expiry)
    last_seen: float = 0.0

    @property
    def has_pending_flash(self) -> bool:
        return self.flash is not None

    def take_flash(self) -> Flash | None:
        """Return the pending flash and delete it."""
        flash, self.flash = self.flash, None
        return flash
