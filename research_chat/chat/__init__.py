"""Chat service and session storage."""

from research_chat.chat.service import ChatService, detect_redirect, fallback_reply
from research_chat.chat.sessions import SessionStore

__all__ = ["ChatService", "SessionStore", "detect_redirect", "fallback_reply"]
