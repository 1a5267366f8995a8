"""Site Middleware — single ASGI wrapper around request dispatch.

Invariants:
    - Non-root paths with a trailing slash get 301 to the slash-free path (query kept)
    - Security headers are applied to EVERY response at http.response.start
    - A newly issued session id is sent as exactly one Set-Cookie header
    - Any exception escaping the app is logged with traceback and classified
      (internal_error | fatal_error); if no bytes were sent yet, a 500 replaces it
    - After the response has started nothing is rewritten: the failure is re-raised
    - Production responses never contain exception types or messages

Design Decisions:
    - Pure ASGI over BaseHTTPMiddleware: sees http.response.start, so it knows
      whether headers already went out
    - One middleware instead of separate catch-all and shutdown hooks:
      every failure path is classified the same way
"""

import logging
from http.cookies import SimpleCookie
from typing import Any

from fastapi.responses import JSONResponse, RedirectResponse, Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from minisite.api.deps import ISSUED_SESSION_ID
from minisite.config import Settings
from minisite.core.errors import classify_failure
from minisite.core.negotiation import wants_json
from minisite.core.request_info import RequestInfo
from minisite.core.request_path import canonical_redirect
from minisite.core.security_headers import apply_security_headers
from minisite.rendering.layout import render_page
from minisite.rendering.pages import error_fragment

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "An unexpected error occurred. Please try again later."


class SiteMiddleware:
    """Canonical paths, security headers, session cookie, and failure handling."""

    def __init__(self, app: ASGIApp, settings: Settings):
        self.app = app
        self.settings = settings

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        info = RequestInfo.from_scope(scope)
        state: dict[str, Any] = scope.setdefault("state", {})
        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
                headers = list(message.get("headers", []))
                apply_security_headers(headers)
                session_id = state.get(ISSUED_SESSION_ID)
                if session_id:
                    headers.append((b"set-cookie", self._session_cookie(session_id)))
                message = {**message, "headers": headers}
            await send(message)

        target = canonical_redirect(info.path)
        if target is not None:
            if info.query_string:
                target = f"{target}?{info.query_string}"
            await RedirectResponse(target, status_code=301)(scope, receive, send_wrapper)
            return

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            code = classify_failure(exc)
            logger.error(
                f"Unhandled {code} on {info.method} {info.path}: {exc!r}",
                exc_info=True,
                extra={
                    "error_code": code,
                    "error_type": type(exc).__name__,
                    "path": info.path,
                    "method": info.method,
                    "request_id": info.request_id,
                },
            )
            if response_started:
                raise
            response = self._failure_response(info, exc, code)
            await response(scope, receive, send_wrapper)

    def _session_cookie(self, session_id: str) -> bytes:
        name = self.settings.session_cookie_name
        cookie: SimpleCookie = SimpleCookie()
        cookie[name] = session_id
        morsel = cookie[name]
        morsel["path"] = "/"
        morsel["httponly"] = True
        morsel["samesite"] = "Lax"
        if self.settings.session_cookie_secure:
            morsel["secure"] = True
        return morsel.OutputString().encode("latin-1")

    def _failure_response(
        self, info: RequestInfo, exc: Exception, code: str,
    ) -> Response:
        debug = self.settings.debug
        if wants_json(info.path, info.accept):
            body: dict[str, str] = {"error": code}
            if debug:
                body["message"] = str(exc)
                body["type"] = type(exc).__name__
            return JSONResponse(body, status_code=500)

        detail = (type(exc).__name__, str(exc)) if debug else None
        return render_page(
            "Server error",
            error_fragment(GENERIC_FAILURE_MESSAGE, detail),
            settings=self.settings,
            current_path=info.path,
            status_code=500,
        )
