"""Mini README: Simulated chat assistant.

Structure:
    * ChatMessage - one chat bubble.
    * MockResponder - picks a canned reply after a typing delay.
    * ChatSession - conversation history plus pending reply tasks.

Replies are canned text and never consult the ledger. Each reply runs as
its own asyncio task so the conversation can be abandoned mid-reply with
``cancel_pending``; a cancelled reply never reaches the history.
"""

from __future__ import annotations

import asyncio
import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Set
from uuid import uuid4

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ChatMessage:
    """Single message exchanged in the assistant chat."""

    text: str
    is_from_user: bool = False
    timestamp: datetime = field(default_factory=datetime.now)
    id: str = field(default_factory=lambda: uuid4().hex)

    def as_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "is_from_user": self.is_from_user,
            "timestamp": self.timestamp.isoformat(),
        }


SAMPLE_MESSAGES = (
    ("Hello! How can I help you with your finances today?", False),
    ("I want to check my account balance", True),
    ("Your current balance is $2,458.32", False),
    ("Can you show me my recent transactions?", True),
    ("Sure! Here are your last 5 transactions...", False),
)


class MockResponder:
    """Produce canned assistant replies after a simulated typing delay."""

    def __init__(self, delay_seconds: float = 1.5, rng: Optional[random.Random] = None) -> None:
        self.delay_seconds = delay_seconds
        self._rng = rng or random.Random()

    def candidate_replies(self, text: str) -> List[str]:
        return [
            f"I understand you're asking about: {text}. How can I assist you further?",
            "Thanks for your message! I'm here to help with your financial questions.",
            "Let me check that information for you...",
            "I can help you with that! What specific details would you like to know?",
            "Based on your question, here's what I found...",
        ]

    async def reply(self, text: str) -> ChatMessage:
        """Wait for the typing delay, then return a reply bubble."""

        await asyncio.sleep(self.delay_seconds)
        response = self._rng.choice(self.candidate_replies(text))
        return ChatMessage(response, is_from_user=False)


class ChatSession:
    """Conversation history with the mock assistant."""

    def __init__(self, responder: MockResponder, *, seed_samples: bool = True) -> None:
        self._responder = responder
        self._messages: List[ChatMessage] = []
        self._pending: Set[asyncio.Task] = set()
        if seed_samples:
            self._messages.extend(
                ChatMessage(text, is_from_user=from_user) for text, from_user in SAMPLE_MESSAGES
            )

    @property
    def messages(self) -> List[ChatMessage]:
        return list(self._messages)

    @property
    def is_typing(self) -> bool:
        return any(not task.done() for task in self._pending)

    def send(self, text: str) -> Optional[asyncio.Task]:
        """Append the user's message and schedule the assistant reply.

        Blank input is ignored and returns ``None``. Must be called from a
        running event loop; the returned task resolves to the reply.
        """

        if not text.strip():
            return None
        self._messages.append(ChatMessage(text, is_from_user=True))
        task = asyncio.get_running_loop().create_task(self._deliver_reply(text))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        LOGGER.debug("Scheduled assistant reply (%s pending)", len(self._pending))
        return task

    async def _deliver_reply(self, text: str) -> ChatMessage:
        message = await self._responder.reply(text)
        self._messages.append(message)
        return message

    def cancel_pending(self) -> int:
        """Cancel replies that have not arrived yet; return how many."""

        cancelled = 0
        for task in list(self._pending):
            if not task.done():
                task.cancel()
                cancelled += 1
        if cancelled:
            LOGGER.info("Cancelled %s pending assistant replies", cancelled)
        return cancelled
