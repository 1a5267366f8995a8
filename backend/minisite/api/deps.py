"""Dependencies — explicit per-request context for route handlers.

Invariants:
    - Settings and the session store come from app.state (set by create_app)
    - contact_session() yields the caller's session while holding its lock
    - A session is created lazily, only for routes that depend on it;
      the new id is handed to the middleware via request.state.issued_session_id

Design Decisions:
    - Lazy creation: health probes and static assets never allocate sessions
    - Unknown/expired cookie ids are replaced, never adopted (no session fixation)
"""

from collections.abc import AsyncIterator

from fastapi import Depends, Request

from minisite.config import Settings
from minisite.core.request_info import RequestInfo
from minisite.core.session_state import SessionData
from minisite.infrastructure.session_store import SessionStore

ISSUED_SESSION_ID = "issued_session_id"


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_session_store(request: Request) -> SessionStore:
    return request.app.state.session_store


def get_request_info(request: Request) -> RequestInfo:
    return RequestInfo.from_scope(request.scope)


async def contact_session(
    request: Request,
    settings: Settings = Depends(get_app_settings),
    store: SessionStore = Depends(get_session_store),
) -> AsyncIterator[SessionData]:
    """Current session (created on first use), locked for the handler's duration."""
    session_id = request.cookies.get(settings.session_cookie_name)
    session = store.get(session_id)
    if session is None:
        session_id = store.create()
        setattr(request.state, ISSUED_SESSION_ID, session_id)
        session = store.get(session_id)

    async with store.lock(session_id):
        yield session
