"""API routes."""

from research_chat.api.routes.ai import router as ai_router
from research_chat.api.routes.chat import router as chat_router
from research_chat.api.routes.health import router as health_router
from research_chat.api.routes.parse import router as parse_router
from research_chat.api.routes.research import router as research_router

__all__ = [
    "health_router",
    "ai_router",
    "chat_router",
    "research_router",
    "parse_router",
]
