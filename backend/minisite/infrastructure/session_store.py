"""Session Store — server-side, in-memory session records keyed by cookie id.

Invariants:
    - Session ids are server-issued (secrets.token_urlsafe); unknown ids are never adopted
    - Idle sessions (last_seen older than ttl) are invisible and purged on create()
    - At most max_entries live sessions: create() evicts least recently used first
    - Records are kept in last_seen order (lookups move a session to the end)
    - One asyncio.Lock per session id: no global lock, no cross-session contention

Design Decisions:
    - Instance on app.state over a module-level dict: passed explicitly,
      fresh per app (tests get isolated stores)
    - OrderedDict as LRU: expiry and eviction both pop from the front, no full scans
    - In-memory only: single-process uvicorn, sessions lost on restart
"""

import asyncio
import logging
import secrets
import time
from collections import OrderedDict
from collections.abc import Callable

from minisite.core.domain_types import SessionId
from minisite.core.session_state import SessionData

logger = logging.getLogger(__name__)

SESSION_ID_BYTES = 32


class SessionStore:
    """In-memory session records with per-session locking, idle expiry, and a size cap."""

    def __init__(
        self, ttl_seconds: int = 7200, max_entries: int = 10_000,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._ttl = ttl_seconds
        self._max_entries = max(1, max_entries)
        self._clock = clock
        self._sessions: OrderedDict[SessionId, SessionData] = OrderedDict()
        self._locks: dict[SessionId, asyncio.Lock] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return isinstance(session_id, str) and self.get(SessionId(session_id)) is not None

    def _expired(self, data: SessionData, now: float) -> bool:
        return now - data.last_seen > self._ttl

    def get(self, session_id: SessionId | None) -> SessionData | None:
        """Live session for id (touching it), or None if unknown/expired."""
        if not session_id:
            return None
        data = self._sessions.get(session_id)
        if data is None:
            return None
        now = self._clock()
        if self._expired(data, now):
            self.discard(session_id)
            return None
        data.last_seen = now
        self._sessions.move_to_end(session_id)
        return data

    def create(self) -> SessionId:
        """Issue a new session id with an empty record."""
        self.purge_expired()
        evicted = 0
        while len(self._sessions) >= self._max_entries:
            oldest = next(iter(self._sessions))
            self.discard(oldest)
            evicted += 1
        if evicted:
            logger.warning(f"Session store full: evicted {evicted} least recently used")

        session_id = SessionId(secrets.token_urlsafe(SESSION_ID_BYTES))
        self._sessions[session_id] = SessionData(last_seen=self._clock())
        return session_id

    def lock(self, session_id: SessionId) -> asyncio.Lock:
        """Per-session lock; hold it while reading/mutating that session."""
        return self._locks.setdefault(session_id, asyncio.Lock())

    def discard(self, session_id: SessionId) -> None:
        self._sessions.pop(session_id, None)
        lock = self._locks.get(session_id)
        if lock is not None and not lock.locked():
            del self._locks[session_id]

    def purge_expired(self) -> int:
        now = self._clock()
        purged = 0
        while self._sessions:
            oldest = next(iter(self._sessions))
            if not self._expired(self._sessions[oldest], now):
                break
            self.discard(oldest)
            purged += 1
        if purged:
            logger.debug(f"Purged {purged} expired sessions")
        return purged
