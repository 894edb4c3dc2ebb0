"""Research flow and parser endpoint models."""

from pydantic import BaseModel, Field

from research_chat.models.chat import ChatTurn
from research_chat.models.research import ResearchTitleSuggestion


class ChatRequest(BaseModel):
    """One user message for a chat session."""

    message: str = Field(..., description="User message text")


class SelectRequest(BaseModel):
    """Title suggestion chosen by the user."""

    id: str = Field(..., min_length=1, description="Suggestion id from the last title turn")


class SelectionResponse(BaseModel):
    """Confirmation turn plus presentation details of the chosen title."""

    turn: ChatTurn
    suggestion: ResearchTitleSuggestion
    details: dict[str, str] = Field(default_factory=dict, description="Description, scope, methodology, results")


class ParseRequest(BaseModel):
    """Raw AI response text to run through a parser."""

    text: str = Field(default="", description="Full text of one AI response")


class TitlesResponse(BaseModel):
    suggestions: list[ResearchTitleSuggestion] = Field(default_factory=list)


class LinkWithFavicon(BaseModel):
    """Extracted link with the icon URL a client can render next to it."""

    label: str
    href: str
    favicon: str


class LinksResponse(BaseModel):
    links: list[LinkWithFavicon] = Field(default_factory=list)
