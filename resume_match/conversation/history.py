"""history.py
Bounded per-conversation message history.
"""
from collections import deque
from typing import Deque, List

from resume_match.config import SCREENER_DEFAULTS
from resume_match.models import ChatMessage


class ConversationHistory:
    """
    Holds the most recent messages of one conversation, oldest first.

    Once `max_messages` is reached every append drops the oldest message, so
    the default of 10 keeps the last 5 question/answer exchanges.
    """

    def __init__(self, max_messages: int = SCREENER_DEFAULTS.MAX_HISTORY_MESSAGES):
        if max_messages <= 0:
            raise ValueError("max_messages must be a positive integer.")
        self._messages: Deque[ChatMessage] = deque(maxlen=max_messages)

    @property
    def max_messages(self) -> int:
        return self._messages.maxlen

    def append(self, message: ChatMessage) -> None:
        self._messages.append(message)

    def extend_exchange(self, question: str, answer: str) -> None:
        """Record a user question followed by the assistant answer."""
        self._messages.append(ChatMessage(role="user", content=question))
        self._messages.append(ChatMessage(role="assistant", content=answer))

    def messages(self) -> List[ChatMessage]:
        """Return a snapshot of the history; mutating it does not affect the history."""
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)
