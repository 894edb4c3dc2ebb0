"""Research assistant flow: session state, prompts and presentation helpers."""

from research_chat.research.details import suggestion_details
from research_chat.research.session import ResearchSession, ResearchStep, is_start_command

__all__ = ["ResearchSession", "ResearchStep", "is_start_command", "suggestion_details"]
