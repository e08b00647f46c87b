"""
models/session.py
-----------------
Domain model for the per-chat conversation state.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class ChatSession:
    """
    Conversation state for a single Telegram chat.

    Attributes:
        chat_id: Telegram chat ID.
        awaiting_public_key: True between /check_balance and the next message.
        created_at: When the session was first seen.
        updated_at: Last time the flag changed.
    """
    chat_id: int
    awaiting_public_key: bool = False
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def arm(self) -> None:
        """Wait for a public key on the next message."""
        self.awaiting_public_key = True
        self.updated_at = datetime.now()

    def disarm(self) -> bool:
        """
        Clear the pending flag.

        Returns:
            Whether the session was awaiting a key before the call.
        """
        was_pending = self.awaiting_public_key
        self.awaiting_public_key = False
        self.updated_at = datetime.now()
        return was_pending

    def __str__(self) -> str:
        state = "awaiting key" if self.awaiting_public_key else "idle"
        return f"ChatSession({self.chat_id}, {state})"
