"""
In-memory conversation history per chat session.
Keeps a bounded window of recent turns for a bounded number of sessions;
nothing is persisted.
"""
import threading
from collections import OrderedDict
from typing import List, Optional
from sikshabot.core.config import settings
from sikshabot.core.logging_config import logger
from sikshabot.models.schemas import ChatTurn


class HistoryService:
    """Service for tracking recent conversation turns by session id."""

    def __init__(self, max_messages: Optional[int] = None, max_sessions: Optional[int] = None):
        """
        Args:
            max_messages: Number of user/assistant exchanges kept per session
            max_sessions: Number of sessions kept; the least recently used is evicted first
        """
        self.max_messages = settings.history_max_messages if max_messages is None else max_messages
        self.max_sessions = settings.history_max_sessions if max_sessions is None else max_sessions
        self._sessions: "OrderedDict[str, List[ChatTurn]]" = OrderedDict()
        self._lock = threading.Lock()

    def append_exchange(self, session_id: str, user_message: str, reply: str) -> List[ChatTurn]:
        """
        Record one user message and the assistant reply.

        Returns:
            Copy of the session history after trimming
        """
        evicted = []
        with self._lock:
            history = self._sessions.setdefault(session_id, [])
            self._sessions.move_to_end(session_id)
            history.append(ChatTurn(role="user", content=user_message))
            history.append(ChatTurn(role="assistant", content=reply))

            limit = self.max_messages * 2
            if len(history) > limit:
                del history[:len(history) - limit]

            while len(self._sessions) > self.max_sessions:
                oldest, _ = self._sessions.popitem(last=False)
                evicted.append(oldest)

            snapshot = list(history)

        if evicted:
            logger.debug(f"[HistoryService] Evicted {len(evicted)} idle session(s)")
        return snapshot

    def get_history(self, session_id: str) -> List[ChatTurn]:
        with self._lock:
            return list(self._sessions.get(session_id, []))

    def clear(self, session_id: Optional[str]) -> bool:
        """Drop a session's history. Returns True if the session existed."""
        if not session_id:
            return False
        with self._lock:
            removed = self._sessions.pop(session_id, None) is not None
        if removed:
            logger.info(f"[HistoryService] Cleared history for session {session_id}")
        return removed

    def session_count(self) -> int:
        with self._lock:
            return len(self._sessions)
