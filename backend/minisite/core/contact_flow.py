"""Contact Flow — state machine for contact form submissions (post-redirect-get).

States: NoSession → SessionWithToken → (PendingFlash | Clean)

Invariants:
    - A submission only ever sets a flash; nothing else in the session changes
    - CSRF is checked before the fields (a forged request learns nothing about validation)
    - Fields are judged after trimming whitespace
    - The message body is never stored

Design Decisions:
    - Validation problems return a Flash instead of raising: the route always redirects
    - Flash text is raw; escaping happens at render time
"""

from minisite.core.csrf import verify_token
from minisite.core.domain_types import Flash, FlashLevel
from minisite.core.session_state import SessionData

SECURITY_CHECK_FAILED = "Security check failed. Please try again."
FILL_IN_BOTH_FIELDS = "Please fill in both fields."


def acknowledgement(name: str) -> str:
    return f"Thanks, {name}! Your message was received."


def handle_submission(
    session: SessionData,
    submitted_token: str | None,
    name: str | None,
    message: str | None,
) -> Flash:
    """Validate a submission and store the resulting flash on the session."""
    name = (name or "").strip()
    message = (message or "").strip()

    if not verify_token(session, submitted_token):
        flash = Flash(FlashLevel.ERROR, SECURITY_CHECK_FAILED)
    elif not name or not message:
        flash = Flash(FlashLevel.ERROR, FILL_IN_BOTH_FIELDS)
    else:
        flash = Flash(FlashLevel.SUCCESS, acknowledgement(name))

    session.flash = flash
    return flash
