"""Root conftest — shared test configuration and app/client fixtures.

Invariants:
    - Every test gets a fresh app (own Settings, own SessionStore)
    - Environment never decides test behavior: Settings built explicitly

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises the full middleware stack
      without a server; cookies persist across calls like a browser
"""

import os

import pytest
from httpx import ASGITransport, AsyncClient

# Importing minisite.main builds a default app; keep it quiet and deterministic
os.environ.setdefault("APP_ENV", "production")
os.environ.setdefault("LOG_FORMAT", "text")

from minisite.config import Settings  # noqa: E402
from minisite.main import create_app  # noqa: E402


class Boom(RuntimeError):
    """Exception type whose name must never leak in production."""


BOOM_MESSAGE = "database password is hunter2"


def _build_app(settings: Settings):
    app = create_app(settings)

    @app.get("/boom")
    async def boom():
        raise Boom(BOOM_MESSAGE)

    @app.get("/api/boom")
    async def api_boom():
        raise Boom(BOOM_MESSAGE)

    @app.get("/fatal")
    async def fatal():
        raise RecursionError("maximum recursion depth exceeded")

    return app


@pytest.fixture
def settings():
    return Settings(app_env="production", log_format="text", _env_file=None)


@pytest.fixture
def dev_settings():
    return Settings(app_env="development", log_format="text", _env_file=None)


@pytest.fixture
def app(settings):
    return _build_app(settings)


@pytest.fixture
def dev_app(dev_settings):
    return _build_app(dev_settings)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def dev_client(dev_app):
    async with AsyncClient(
        transport=ASGITransport(app=dev_app), base_url="http://test",
    ) as c:
        yield c
