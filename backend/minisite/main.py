"""Minisite — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Settings and the session store are per-app (app.state), never module globals
    - SiteMiddleware wraps everything: canonical paths, security headers,
      session cookie, and the catch-all for unexpected failures
    - Client errors (404/405/domain) handled by api/error_handlers.py

Design Decisions:
    - create_app() factory: tests build apps with their own Settings
    - Lifespan over @app.on_event: logging configured once on startup
    - Interactive docs and OpenAPI disabled: this is a website, and the strict
      CSP would block the docs UI anyway
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from minisite.api.error_handlers import register_error_handlers
from minisite.api.middleware import SiteMiddleware
from minisite.api.routes import contact, health, site_pages, time_api
from minisite.config import Settings, get_settings
from minisite.infrastructure.observability import setup_logging
from minisite.infrastructure.session_store import SessionStore

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Minisite started ({settings.app_env})")
    yield
    logger.info(
        f"Minisite shutting down ({len(app.state.session_store)} live sessions dropped)",
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application with explicit settings."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.site_title,
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    app.state.settings = settings
    app.state.session_store = SessionStore(
        ttl_seconds=settings.session_ttl_seconds,
        max_entries=settings.session_max_entries,
    )

    app.add_middleware(SiteMiddleware, settings=settings)
    register_error_handlers(app)

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(time_api.router)
    app.include_router(site_pages.router)
    app.include_router(contact.router)

    # Static collaborators: stylesheet, theme script, favicon
    app.mount("/assets", StaticFiles(directory=STATIC_DIR), name="assets")

    return app


app = create_app()
