"""
Session Store - Process-wide, in-memory registry of chat sessions.
Sessions live until the process exits; nothing is persisted or evicted.
"""

import asyncio
import logging
from typing import Dict, Optional

from ..models import Session

logger = logging.getLogger(__name__)


class SessionStore:
    """
    Maps caller-supplied session ids to Session objects.

    Each id also owns an asyncio.Lock; callers hold it while they read and
    mutate the session so that seeding and appends for one id never interleave.
    """

    def __init__(self):
        self._sessions: Dict[int, Session] = {}
        self._locks: Dict[int, asyncio.Lock] = {}

    def get_or_create(self, session_id: int) -> Session:
        """
        Return the session for session_id, creating an empty one if unseen.

        The returned object is shared: mutations are visible to later lookups.
        """
        session = self._sessions.get(session_id)
        if session is None:
            session = Session(id=session_id)
            self._sessions[session_id] = session
            logger.debug(f"Session created: {session_id}")
        return session

    def get(self, session_id: int) -> Optional[Session]:
        return self._sessions.get(session_id)

    def lock(self, session_id: int) -> asyncio.Lock:
        """Per-session lock. Creating the lock does not create the session."""
        lock = self._locks.get(session_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[session_id] = lock
        return lock

    def clear(self) -> None:
        self._sessions.clear()
        self._locks.clear()

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


session_store = SessionStore()


def get_session_store() -> SessionStore:
    """FastAPI dependency returning the process-wide store."""
    return session_store
