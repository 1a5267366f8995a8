"""Error Handlers — client-error responses for domain and routing errors.

Invariants:
    - SiteError (other than not-found) → JSON {"error": code} in JSON mode, HTML page otherwise
    - Unmatched GET/HEAD → 404 not-found page with the escaped path, ALWAYS HTML
      (Accept and /api/ prefix do not apply: the escaped path must be in the body)
    - Unmatched or wrong-method non-GET → 405 plain text "method not allowed\\n"
    - Unexpected exceptions are NOT handled here (see api/middleware.py)

Design Decisions:
    - Starlette HTTPException handler registered (not FastAPI's) so router and
      StaticFiles 404/405 are covered too
    - Extracted from main.py: register_error_handlers(app) keeps the factory short
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from minisite.api.deps import get_app_settings, get_request_info
from minisite.core.errors import ErrorSeverity, PageNotFoundError, SiteError
from minisite.core.negotiation import wants_json
from minisite.rendering.layout import render_page
from minisite.rendering.pages import error_fragment, not_found_fragment

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED_TEXT = "method not allowed\n"
_LOG_LEVELS = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def register_error_handlers(app: FastAPI) -> None:
    """Register all client-error handlers on the FastAPI app."""
    _register_site_error_handler(app)
    _register_http_exception_handler(app)
    _register_validation_error_handler(app)


def site_error_response(request: Request, exc: SiteError) -> Response:
    """Response for a SiteError: not-found pages are HTML, the rest negotiated."""
    info = get_request_info(request)
    logger.log(
        _LOG_LEVELS[exc.severity],
        f"{exc.code}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": info.path,
            "method": info.method,
            "status_code": exc.http_status,
        },
    )
    settings = get_app_settings(request)
    if isinstance(exc, PageNotFoundError):
        return render_page(
            "Not found", not_found_fragment(exc.path),
            settings=settings, current_path=info.path,
            status_code=exc.http_status,
        )
    if wants_json(info.path, info.accept):
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())
    return render_page(
        "Error", error_fragment(exc.message),
        settings=settings, current_path=info.path,
        status_code=exc.http_status,
    )


def _register_site_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(SiteError)
    async def handle_site_error(request: Request, exc: SiteError):
        return site_error_response(request, exc)


def _register_http_exception_handler(app: FastAPI) -> None:
    """Register routing (404/405) and other HTTP error handler."""

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException,
    ):
        info = get_request_info(request)
        if exc.status_code == status.HTTP_404_NOT_FOUND and info.method in ("GET", "HEAD"):
            return site_error_response(request, PageNotFoundError(info.path))

        if exc.status_code in (
            status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            logger.info(
                f"Method not allowed: {info.method} {info.path}",
                extra={"path": info.path, "method": info.method, "status_code": 405},
            )
            return PlainTextResponse(
                METHOD_NOT_ALLOWED_TEXT,
                status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
                headers=getattr(exc, "headers", None),
            )

        logger.warning(
            f"HTTP {exc.status_code} on {info.path}: {exc.detail}",
            extra={"path": info.path, "method": info.method, "status_code": exc.status_code},
        )
        if wants_json(info.path, info.accept):
            return JSONResponse(
                status_code=exc.status_code,
                content={"error": "http_error"},
                headers=getattr(exc, "headers", None),
            )
        return PlainTextResponse(
            f"{exc.detail}\n", status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError,
    ):
        info = get_request_info(request)
        logger.warning(
            f"Validation error on {info.path}: {exc.errors()}",
            extra={"path": info.path, "method": info.method, "status_code": 400},
        )
        if wants_json(info.path, info.accept):
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={"error": "validation_error"},
            )
        return render_page(
            "Bad request", error_fragment("The request could not be understood."),
            settings=get_app_settings(request), current_path=info.path,
            status_code=status.HTTP_400_BAD_REQUEST,
        )
