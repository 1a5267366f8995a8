"""Site Pages — the static-ish HTML pages: home, about, request echo.

Invariants:
    - GET (and HEAD) only; other methods fall through to the 405 handler
    - Every value taken from the request or the runtime is escaped by rendering/
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from minisite.api.deps import get_app_settings, get_request_info
from minisite.api.routes.time_api import runtime_version
from minisite.config import Settings
from minisite.core.request_info import RequestInfo
from minisite.rendering.layout import render_page
from minisite.rendering.pages import about_fragment, home_fragment, request_fragment

router = APIRouter(tags=["pages"])


def interface_name(request: Request) -> str:
    """ASGI spec version the server speaks, e.g. "ASGI 3.0"."""
    asgi = request.scope.get("asgi") or {}
    version = asgi.get("spec_version") or asgi.get("version") or "3.0"
    return f"ASGI {version}"


@router.get("/", response_class=HTMLResponse)
async def home(settings: Settings = Depends(get_app_settings)):
    return render_page("", home_fragment(), settings=settings, current_path="/")


@router.get("/about", response_class=HTMLResponse)
async def about(request: Request, settings: Settings = Depends(get_app_settings)):
    body = about_fragment(
        runtime_version(), settings.server_software, interface_name(request),
    )
    return render_page("About", body, settings=settings, current_path="/about")


@router.get("/request", response_class=HTMLResponse)
async def request_echo(
    info: RequestInfo = Depends(get_request_info),
    settings: Settings = Depends(get_app_settings),
):
    """Echo what the server saw: method, path, query, client, headers."""
    return render_page(
        "Request", request_fragment(info),
        settings=settings, current_path="/request",
    )
