"""Mini README: Mock chat assistant for the Pennywise chat tab.

Replies are canned and delayed to feel conversational; no model or remote
service is involved.
"""

from .responder import ChatMessage, ChatSession, MockResponder

__all__ = ["ChatMessage", "ChatSession", "MockResponder"]
