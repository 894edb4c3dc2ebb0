"""Structured research objects parsed out of AI responses."""

from enum import Enum
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_FIELD = "Multidisiplin"
DEFAULT_KEYWORDS = ("Penelitian", "Inovasi")


class Complexity(str, Enum):
    """Coarse difficulty tier of a research title."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ResearchTitleSuggestion(BaseModel):
    """A research title heading recovered from free-form AI text."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(default_factory=lambda: uuid4().hex, description="Opaque id, unique per parse")
    title: str = Field(..., min_length=1, description="Decoration-stripped title")
    description: str = Field(..., description="Normalized or templated description")
    field: str = Field(default=DEFAULT_FIELD, description="Research field category")
    complexity: Complexity = Field(default=Complexity.INTERMEDIATE, description="Complexity tier")
    estimated_duration: str = Field(
        default="6-8 bulan",
        alias="estimatedDuration",
        description="Free-text duration estimate",
    )
    keywords: list[str] = Field(
        default_factory=lambda: list(DEFAULT_KEYWORDS),
        min_length=1,
        max_length=6,
        description="Short keywords, never empty",
    )


class TitleMetadata(BaseModel):
    """Field, complexity and keywords inferred for a title."""

    model_config = ConfigDict(frozen=True)

    field: str = DEFAULT_FIELD
    complexity: Complexity = Complexity.INTERMEDIATE
    keywords: list[str] = Field(default_factory=lambda: list(DEFAULT_KEYWORDS))


class Link(BaseModel):
    """Labeled hyperlink found in AI text."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., description="Link label")
    href: str = Field(..., description="Absolute http(s) URL")
