"""Chat response models returned by the AI route."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from research_chat.models.research import Link, ResearchTitleSuggestion


class NavigateAction(BaseModel):
    """Move the client to an in-app page."""

    type: Literal["navigate"] = "navigate"
    href: str


class RedirectAction(BaseModel):
    """Open an external URL."""

    type: Literal["redirect"] = "redirect"
    url: str


class SuggestAction(BaseModel):
    """Offer a follow-up prompt to the user."""

    type: Literal["suggest"] = "suggest"
    text: str


AIAction = Annotated[
    Union[NavigateAction, RedirectAction, SuggestAction],
    Field(discriminator="type"),
]


class AIResponse(BaseModel):
    """Text returned by the generative model plus typed side actions."""

    text: str
    suggestions: list[str] = Field(default_factory=list)
    actions: list[AIAction] = Field(default_factory=list)


class ChatTurn(BaseModel):
    """One assistant turn as rendered by the chat client."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., description="Markdown text of the assistant message")
    suggestions: list[str] = Field(default_factory=list, description="Quick reply chips")
    actions: list[AIAction] = Field(default_factory=list)
    links: list[Link] = Field(default_factory=list, description="Links found in the text")
    title_suggestions: list[ResearchTitleSuggestion] = Field(
        default_factory=list,
        alias="titleSuggestions",
        description="Parsed research titles, empty for ordinary messages",
    )
    research_step: str = Field(default="initial", alias="researchStep")
