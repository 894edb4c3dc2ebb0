"""Chat model construction."""

from research_chat.llm.factory import create_chat_model
from research_chat.llm.mock import MockChatModel

__all__ = ["MockChatModel", "create_chat_model"]
