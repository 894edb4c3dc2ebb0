"""In-memory store of chat sessions."""

from __future__ import annotations

from collections import OrderedDict

import structlog

from research_chat.research.session import ResearchSession

logger = structlog.get_logger(__name__)


class SessionStore:
    """Keep the most recently used sessions, evicting the oldest beyond ``limit``.

    Each session keeps at most ``history_limit`` chat messages.
    """

    def __init__(self, limit: int = 500, history_limit: int = 50) -> None:
        self.limit = limit
        self.history_limit = history_limit
        self._sessions: OrderedDict[str, ResearchSession] = OrderedDict()

    def get(self, session_id: str) -> ResearchSession | None:
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
        return session

    def get_or_create(self, session_id: str) -> ResearchSession:
        session = self.get(session_id)
        if session is not None:
            return session

        session = ResearchSession(session_id=session_id, max_history=self.history_limit)
        self._sessions[session_id] = session
        while len(self._sessions) > self.limit:
            evicted, _ = self._sessions.popitem(last=False)
            logger.debug("Evicted chat session", session_id=evicted)
        return session

    def drop(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def __len__(self) -> int:
        return len(self._sessions)
