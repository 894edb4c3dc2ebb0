"""Exception hierarchy for the research chat backend."""


class ResearchChatError(Exception):
    """Base class for application errors."""


class UnknownSuggestionError(ResearchChatError):
    """Raised when a title suggestion id is not part of the session."""

    def __init__(self, suggestion_id: str):
        self.suggestion_id = suggestion_id
        super().__init__(f"Unknown title suggestion: {suggestion_id}")


class ModelUnavailableError(ResearchChatError):
    """Raised when every configured chat model failed to answer."""

    def __init__(self, attempted: list[str]):
        self.attempted = attempted
        super().__init__(f"All chat models failed: {', '.join(attempted) or 'none configured'}")
