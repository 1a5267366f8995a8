"""Time Schemas — response model for GET /api/time.

Invariants:
    - utc and unix describe the same instant (whole seconds)
    - request_id is the caller's X-Request-Id verbatim, or null
"""

from pydantic import BaseModel, Field


class TimeResponse(BaseModel):
    """Current server time in two encodings plus runtime info."""
    utc: str = Field(description="ISO-8601 UTC timestamp, e.g. 2026-01-01T00:00:00+00:00")
    unix: int = Field(description="Seconds since the Unix epoch")
    runtime: str
    request_id: str | None = None
