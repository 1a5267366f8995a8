"""Content Negotiation — JSON vs HTML output mode for error responses.

Invariants:
    - JSON mode iff path starts with "/api/" OR Accept mentions application/json
    - Only error output uses this; routes are matched on exact path
"""

API_PREFIX = "/api/"


def wants_json(path: str, accept: str | None) -> bool:
    if path.startswith(API_PREFIX):
        return True
    return "application/json" in (accept or "").lower()
