"""Header Map — ordered, case-insensitive view of request headers.

Invariants:
    - Lookups ignore case ("x-test" == "X-Test")
    - Duplicate names collapse to the LAST value received
    - Iteration order is first-seen order; sorted_items() orders by display name
    - Display names are canonical Title-Case ("x-request-id" → "X-Request-Id")

Design Decisions:
    - Built from raw (name, value) pairs so it works on ASGI byte headers and plain strings
    - Read-only Mapping: request data is immutable for the request's lifetime
"""

from collections.abc import Iterable, Iterator, Mapping


def display_name(name: str) -> str:
    """Canonical Title-Case header name."""
    return "-".join(part.capitalize() for part in name.strip().split("-"))


def _text(value: bytes | str) -> str:
    if isinstance(value, bytes):
        return value.decode("latin-1")
    return value


class HeaderMap(Mapping[str, str]):
    """Case-insensitive, last-wins header mapping."""

    def __init__(self, raw: Iterable[tuple[bytes | str, bytes | str]] = ()):
        self._values: dict[str, tuple[str, str]] = {}
        for name, value in raw:
            name = _text(name)
            key = name.strip().lower()
            self._values[key] = (display_name(name), _text(value))

    def __getitem__(self, name: str) -> str:
        return self._values[name.strip().lower()][1]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip().lower() in self._values

    def __iter__(self) -> Iterator[str]:
        return (shown for shown, _ in self._values.values())

    def __len__(self) -> int:
        return len(self._values)

    def sorted_items(self) -> list[tuple[str, str]]:
        """(display name, value) pairs sorted by name, case-insensitively."""
        return sorted(self._values.values(), key=lambda item: item[0].lower())
