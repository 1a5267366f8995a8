"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - SessionId wraps the opaque cookie value — never a user-chosen string once issued
    - Flash is immutable: a new message replaces the old one, never edits it
    - All valid flash levels encoded as an Enum — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: level doubles as the CSS modifier class in rendered markup
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

SessionId = NewType("SessionId", str)
CsrfToken = NewType("CsrfToken", str)


# ─── Enums ───────────────────────────────────────────────────────

class FlashLevel(str, Enum):
    """Outcome of a contact submission, as shown to the user."""
    SUCCESS = "success"
    ERROR = "error"


# ─── Value Types ─────────────────────────────────────────────────

@dataclass(frozen=True)
class Flash:
    """One-shot message rendered on the next GET, then discarded."""
    level: FlashLevel
    text: str
