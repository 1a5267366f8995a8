"""Time API — current UTC time as JSON.

Invariants:
    - GET (and HEAD) only; ANY other method, standard or not,
      → 405 {"error": "method_not_allowed"}
    - utc and unix are derived from ONE clock reading
    - request_id echoes the last X-Request-Id header verbatim, or null

Design Decisions:
    - Registered without a method list so unusual methods reach the handler
      and get the JSON 405 instead of the router's plain-text one
"""

import platform

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from minisite.core.clock import iso_utc, utc_now
from minisite.core.errors import MethodNotAllowedError
from minisite.core.request_info import RequestInfo
from minisite.schemas.time import TimeResponse

router = APIRouter(tags=["api"])

TIME_PATH = "/api/time"


def runtime_version() -> str:
    return f"{platform.python_implementation()} {platform.python_version()}"


async def current_time(request: Request) -> JSONResponse:
    """Current server time in ISO-8601 and Unix epoch seconds."""
    info = RequestInfo.from_scope(request.scope)
    if info.method not in ("GET", "HEAD"):
        raise MethodNotAllowedError(info.method, info.path)

    now = utc_now()
    body = TimeResponse(
        utc=iso_utc(now),
        unix=int(now.timestamp()),
        runtime=runtime_version(),
        request_id=info.request_id,
    )
    return JSONResponse(body.model_dump())


router.add_route(TIME_PATH, current_time, include_in_schema=False)
