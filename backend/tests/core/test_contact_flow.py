"""Contact Flow — CSRF first, then field checks, flash always set."""

from minisite.core.contact_flow import (
    FILL_IN_BOTH_FIELDS, SECURITY_CHECK_FAILED, acknowledgement, handle_submission,
)
from minisite.core.csrf import ensure_token
from minisite.core.domain_types import FlashLevel
from minisite.core.session_state import SessionData


def _session():
    session = SessionData()
    return session, ensure_token(session)


def test_bad_token_sets_security_flash():
    session, _ = _session()
    flash = handle_submission(session, "forged", "Ada", "Hello")
    assert flash.level is FlashLevel.ERROR
    assert flash.text == SECURITY_CHECK_FAILED
    assert session.flash == flash


def test_bad_token_wins_over_empty_fields():
    session, _ = _session()
    flash = handle_submission(session, None, "", "")
    assert flash.text == SECURITY_CHECK_FAILED


def test_bad_token_leaves_token_unchanged():
    session, token = _session()
    handle_submission(session, "forged", "Ada", "Hello")
    assert session.csrf_token == token


def test_blank_fields_after_trim():
    session, token = _session()
    flash = handle_submission(session, token, "   ", "Hello")
    assert flash.level is FlashLevel.ERROR
    assert flash.text == FILL_IN_BOTH_FIELDS

    flash = handle_submission(session, token, "Ada", "\n\t ")
    assert flash.text == FILL_IN_BOTH_FIELDS


def test_valid_submission_acknowledges_trimmed_name():
    session, token = _session()
    flash = handle_submission(session, token, "  Ada ", "Hello")
    assert flash.level is FlashLevel.SUCCESS
    assert flash.text == acknowledgement("Ada")
    assert "Ada" in flash.text


def test_missing_session_token_always_fails():
    session = SessionData()
    flash = handle_submission(session, "", "Ada", "Hello")
    assert flash.text == SECURITY_CHECK_FAILED
