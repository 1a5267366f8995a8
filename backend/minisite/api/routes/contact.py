"""Contact Form — CSRF-protected form with post-redirect-get and flash messages.

Invariants:
    - GET ensures the session has a CSRF token, then pops and renders the flash
    - POST always answers 303 → /contact, whatever the outcome
    - The submitted message is never stored, logged, or forwarded

Design Decisions:
    - Form read by hand, not Form(...): missing, non-text, or unparsable fields
      become a flash instead of a 400/422, so every POST still redirects
    - Token is ensured AFTER verifying, so a session without one always fails the check
"""

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from minisite.api.deps import contact_session, get_app_settings
from minisite.config import Settings
from minisite.core.contact_flow import handle_submission
from minisite.core.csrf import ensure_token
from minisite.core.domain_types import FlashLevel
from minisite.core.session_state import SessionData
from minisite.rendering.layout import render_page
from minisite.rendering.pages import contact_fragment

logger = logging.getLogger(__name__)
router = APIRouter(tags=["contact"])

CONTACT_PATH = "/contact"


@router.get(CONTACT_PATH, response_class=HTMLResponse)
async def contact_form(
    session: SessionData = Depends(contact_session),
    settings: Settings = Depends(get_app_settings),
):
    """Render the form; a pending flash is shown once and discarded."""
    token = ensure_token(session)
    flash = session.take_flash()
    return render_page(
        "Contact", contact_fragment(token, flash),
        settings=settings, current_path=CONTACT_PATH,
    )


@router.post(CONTACT_PATH)
async def submit_contact(
    request: Request,
    session: SessionData = Depends(contact_session),
):
    """Validate, set a flash, redirect back to the form."""
    fields = await _text_fields(request)
    flash = handle_submission(
        session, fields.get("csrf_token"), fields.get("name"), fields.get("message"),
    )
    ensure_token(session)

    if flash.level is FlashLevel.SUCCESS:
        logger.info("Contact submission accepted", extra={"path": CONTACT_PATH})
    else:
        logger.warning(
            f"Contact submission rejected: {flash.text}",
            extra={"path": CONTACT_PATH},
        )
    return RedirectResponse(CONTACT_PATH, status_code=status.HTTP_303_SEE_OTHER)


async def _text_fields(request: Request) -> dict[str, str]:
    """Text form fields (last value wins); empty if the body cannot be parsed."""
    try:
        form = await request.form()
    except StarletteHTTPException:
        logger.warning("Unparsable contact form body", extra={"path": CONTACT_PATH})
        return {}
    return {key: value for key, value in form.items() if isinstance(value, str)}
