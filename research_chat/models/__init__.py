"""Domain models."""

from research_chat.models.chat import (
    AIAction,
    AIResponse,
    ChatTurn,
    NavigateAction,
    RedirectAction,
    SuggestAction,
)
from research_chat.models.research import (
    DEFAULT_FIELD,
    DEFAULT_KEYWORDS,
    Complexity,
    Link,
    ResearchTitleSuggestion,
    TitleMetadata,
)

__all__ = [
    "AIAction",
    "AIResponse",
    "ChatTurn",
    "Complexity",
    "DEFAULT_FIELD",
    "DEFAULT_KEYWORDS",
    "Link",
    "NavigateAction",
    "RedirectAction",
    "ResearchTitleSuggestion",
    "SuggestAction",
    "TitleMetadata",
]
