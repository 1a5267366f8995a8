"""Request Info — immutable, framework-free snapshot of the incoming request.

Invariants:
    - Built once from the ASGI scope; never mutated afterwards
    - path is canonical (normalize_path), method is uppercase (normalize_method)
    - Header lookups are case-insensitive, last value wins
"""

from dataclasses import dataclass
from typing import Any

from minisite.core.header_map import HeaderMap
from minisite.core.request_path import normalize_method, normalize_path


@dataclass(frozen=True)
class RequestInfo:
    method: str
    path: str
    query_string: str
    headers: HeaderMap
    remote_addr: str | None = None

    @classmethod
    def from_scope(cls, scope: dict[str, Any]) -> "RequestInfo":
        client = scope.get("client")
        return cls(
            method=normalize_method(scope.get("method")),
            path=normalize_path(scope.get("path")),
            query_string=scope.get("query_string", b"").decode("latin-1"),
            headers=HeaderMap(scope.get("headers") or []),
            remote_addr=client[0] if client else None,
        )

    @property
    def accept(self) -> str | None:
        return self.headers.get("accept")

    @property
    def forwarded_for(self) -> str | None:
        return self.headers.get("x-forwarded-for")

    @property
    def request_id(self) -> str | None:
        return self.headers.get("x-request-id")
