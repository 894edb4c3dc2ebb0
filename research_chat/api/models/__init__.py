"""API request and response models."""

from research_chat.api.models.ai import AIRequest
from research_chat.api.models.health import HealthResponse
from research_chat.api.models.research import (
    ChatRequest,
    LinksResponse,
    LinkWithFavicon,
    ParseRequest,
    SelectionResponse,
    SelectRequest,
    TitlesResponse,
)

__all__ = [
    # AI
    "AIRequest",
    # Health
    "HealthResponse",
    # Research
    "ChatRequest",
    "SelectRequest",
    "SelectionResponse",
    # Parsers
    "ParseRequest",
    "TitlesResponse",
    "LinkWithFavicon",
    "LinksResponse",
]
