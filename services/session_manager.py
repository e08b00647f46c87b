"""
services/session_manager.py
----------------------------
Owns the per-chat sessions for the lifetime of the bot.

Updates are handled one at a time by a single consumer, so no locking
is done here.
"""

from typing import Optional

from models.session import ChatSession
from utils.logger import get_logger

logger = get_logger(__name__)


class SessionManager:
    """In-memory registry of ChatSession objects keyed by chat ID."""

    def __init__(self):
        self._sessions: dict[int, ChatSession] = {}

    def get(self, chat_id: int) -> Optional[ChatSession]:
        return self._sessions.get(chat_id)

    def get_or_create(self, chat_id: int) -> ChatSession:
        """Return the chat's session, creating it on first use."""
        session = self._sessions.get(chat_id)
        if session is None:
            session = ChatSession(chat_id=chat_id)
            self._sessions[chat_id] = session
            logger.debug(f"Created session for chat {chat_id}")
        return session

    def request_public_key(self, chat_id: int) -> ChatSession:
        """Mark the chat as awaiting a public key for a balance check."""
        session = self.get_or_create(chat_id)
        session.arm()
        return session

    def consume_pending(self, chat_id: int) -> bool:
        """
        Clear the chat's pending flag.

        Returns:
            True if the chat was awaiting a public key, so the current
            message must be treated as that key.
        """
        session = self._sessions.get(chat_id)
        if session is None:
            return False
        return session.disarm()

    def end(self, chat_id: int) -> bool:
        """Drop a chat's session. Returns False if there was none."""
        return self._sessions.pop(chat_id, None) is not None

    def clear(self) -> None:
        """Drop every session."""
        count = len(self._sessions)
        self._sessions.clear()
        logger.info(f"Cleared {count} chat session(s).")

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, chat_id: int) -> bool:
        return chat_id in self._sessions
