"""Per-conversation state for the research assistant flow."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import structlog

from research_chat.exceptions import UnknownSuggestionError
from research_chat.models.research import ResearchTitleSuggestion
from research_chat.parsing.titles import TitleExtractor

logger = structlog.get_logger(__name__)

START_COMMANDS = ("mulai penelitian", "start research", "research assistant")
TITLE_REQUEST_HINTS = ("belum punya", "bidang", "tertarik meneliti", "fokus")
EXIT_COMMANDS = ("kembali ke chat biasa", "keluar research", "stop research")
RETRY_COMMANDS = ("cari judul lain", "generate judul lain", "ganti bidang penelitian")
TITLE_RESPONSE_MARKER = "judul penelitian"


class ResearchStep(str, Enum):
    """Stage of the research assistant flow."""

    INITIAL = "initial"
    TITLE = "title"
    TITLE_INPUT = "title-input"
    JOURNALS = "journals"
    ANALYSIS = "analysis"
    REFERENCES = "references"
    WRITING = "writing"


def is_start_command(text: str) -> bool:
    lowered = text.lower()
    return any(command in lowered for command in START_COMMANDS)


def is_exit_command(text: str) -> bool:
    lowered = text.lower()
    return any(command in lowered for command in EXIT_COMMANDS)


def is_retry_command(text: str) -> bool:
    lowered = text.lower()
    return any(command in lowered for command in RETRY_COMMANDS)


@dataclass
class ResearchSession:
    """Mutable chat session state, owned by one conversation."""

    session_id: str
    is_research_mode: bool = False
    step: ResearchStep = ResearchStep.INITIAL
    title_suggestions: list[ResearchTitleSuggestion] = field(default_factory=list)
    selected_title_id: Optional[str] = None
    history: list[dict[str, str]] = field(default_factory=list)
    max_history: int = 50

    def start(self) -> None:
        """Enter research mode at the title step."""
        self.is_research_mode = True
        self.step = ResearchStep.TITLE
        self.title_suggestions = []
        self.selected_title_id = None
        logger.info("Research mode started", session_id=self.session_id)

    def exit(self) -> None:
        self.is_research_mode = False
        self.step = ResearchStep.INITIAL
        logger.info("Research mode closed", session_id=self.session_id)

    def wants_title_generation(self, text: str) -> bool:
        """Whether user input at the title step describes a background or field."""
        if not self.is_research_mode or self.step != ResearchStep.TITLE:
            return False
        lowered = text.lower()
        return any(hint in lowered for hint in TITLE_REQUEST_HINTS)

    def apply_response(
        self, text: str, extractor: Optional[TitleExtractor] = None
    ) -> list[ResearchTitleSuggestion]:
        """Parse titles out of an AI response when the flow expects them.

        Returns an empty list when the session is not waiting for titles or
        nothing title-like was found; the caller then shows the raw text.
        """
        if not self.is_research_mode or self.step != ResearchStep.TITLE:
            return []
        if TITLE_RESPONSE_MARKER not in text.lower():
            return []

        parsed = (extractor or TitleExtractor()).extract(text)
        if parsed:
            self.title_suggestions = parsed
            self.selected_title_id = None
        logger.info("Parsed title suggestions", session_id=self.session_id, count=len(parsed))
        return parsed

    def find_suggestion(self, suggestion_id: str) -> ResearchTitleSuggestion:
        for suggestion in self.title_suggestions:
            if suggestion.id == suggestion_id:
                return suggestion
        raise UnknownSuggestionError(suggestion_id)

    def select_title(self, suggestion_id: str) -> ResearchTitleSuggestion:
        """Mark a suggestion as chosen and move on to journal search."""
        suggestion = self.find_suggestion(suggestion_id)
        self.selected_title_id = suggestion.id
        self.step = ResearchStep.JOURNALS
        logger.info("Research title selected", session_id=self.session_id, title=suggestion.title[:80])
        return suggestion

    @property
    def selected_title(self) -> Optional[ResearchTitleSuggestion]:
        if self.selected_title_id is None:
            return None
        return next((s for s in self.title_suggestions if s.id == self.selected_title_id), None)

    def add_message(self, role: str, content: str) -> None:
        """Append a message, keeping only the newest ``max_history`` entries."""
        if not content:
            return
        self.history.append({"role": role, "content": content})
        if len(self.history) > self.max_history:
            del self.history[: len(self.history) - self.max_history]

    def render_history(self, limit: int) -> str:
        """Render the last ``limit`` messages for a prompt."""
        if not self.history or limit <= 0:
            return "Chat history: None."
        lines = ["Chat history:"]
        for item in self.history[-limit:]:
            lines.append(f"- {item['role']}: {item['content']}")
        return "\n".join(lines)
