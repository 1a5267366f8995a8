"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - /healthz returns exactly "ok\\n" as text/plain with 200, for EVERY method
      (including TRACE and extension methods such as PROPFIND)
    - No session, no logging, no dependencies: cheap enough to poll constantly

Design Decisions:
    - Plain Starlette route (methods=None) over api_route: a method list can
      never be complete, and a Route without methods matches any of them
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])


async def health_check(request: Request) -> PlainTextResponse:
    """Liveness probe. Returns ok if the process is up."""
    return PlainTextResponse("ok\n")


router.add_route("/healthz", health_check, include_in_schema=False)
