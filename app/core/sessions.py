"""
Server-side session store.

A session is ``Active`` from creation until either its fixed TTL runs out
(``Expired``) or the user logs out (``Destroyed``).  Neither end state can
be left again.  Expiry is checked lazily whenever a token is resolved; the
periodic prune task only keeps memory bounded.
"""

from __future__ import annotations

import asyncio
import logging
import secrets
import threading
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from app.core.config import settings
from app.core.credentials import Identity

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class SessionRecord:
    session_id: str
    identity: Identity
    created_at: datetime
    expires_at: datetime

    @property
    def user_id(self) -> int:
        return self.identity.id

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


class SessionManager:
    """In-memory session store for a single-instance deployment."""

    def __init__(
        self,
        ttl: timedelta,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.ttl = ttl
        self._clock = clock
        self._sessions: dict[str, SessionRecord] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    def create(self, identity: Identity) -> str:
        """Open a new session for *identity* and return its opaque token."""
        token = secrets.token_urlsafe(32)
        now = self._clock()
        record = SessionRecord(
            session_id=token,
            identity=identity,
            created_at=now,
            expires_at=now + self.ttl,
        )
        with self._lock:
            self._sessions[token] = record
        logger.debug("Session opened for user %d", identity.id)
        return token

    def get(self, token: str | None) -> SessionRecord | None:
        if not token:
            return None
        now = self._clock()
        with self._lock:
            record = self._sessions.get(token)
            if record is None:
                return None
            if record.is_expired(now):
                del self._sessions[token]
                return None
            return record

    def resolve(self, token: str | None) -> Identity | None:
        """Identity bound to *token*; ``None`` if unknown, expired or destroyed."""
        record = self.get(token)
        return record.identity if record else None

    def destroy(self, token: str | None) -> bool:
        if not token:
            return False
        with self._lock:
            return self._sessions.pop(token, None) is not None

    def prune(self) -> int:
        """Drop every expired session and return how many were removed."""
        now = self._clock()
        with self._lock:
            stale = [t for t, rec in self._sessions.items() if rec.is_expired(now)]
            for token in stale:
                del self._sessions[token]
        return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    async def run_pruner(self, interval_seconds: float) -> None:
        """Prune expired sessions every *interval_seconds* until cancelled."""
        while True:
            await asyncio.sleep(interval_seconds)
            removed = self.prune()
            if removed:
                logger.info("Pruned %d expired session(s)", removed)


session_manager = SessionManager(ttl=timedelta(hours=settings.SESSION_TTL_HOURS))
