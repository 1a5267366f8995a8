"""Clock — the one place the application reads wall-clock time.

Invariants:
    - Always timezone-aware UTC, truncated to whole seconds
    - iso_utc() renders "+00:00" offsets (ISO-8601 / RFC 3339), never "Z"
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


def iso_utc(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).isoformat()
