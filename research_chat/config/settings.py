"""Application settings with environment variable support."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API Settings
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Log level")
    log_json: bool = Field(default=False, description="Emit one JSON object per log line")

    # LLM Settings
    llm_mode: Literal["live", "mock"] = Field(default="live", description="LLM mode: live or mock")
    chat_models: str = Field(
        default="google:gemini-2.5-flash,google:gemini-2.0-flash,google:gemini-2.5-pro",
        description="Comma-separated provider:model chain, tried in order",
    )
    chat_model_max_tokens: int = Field(default=2048, description="Chat model max tokens")
    chat_temperature: float = Field(default=0.7, description="Chat model temperature")

    # Provider keys
    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "google_api_key"),
        description="Google Gemini API key (GEMINI_API_KEY or GOOGLE_API_KEY)",
    )
    openai_api_key: Optional[str] = Field(default=None, description="OpenAI API key")
    openai_base_url: Optional[str] = Field(
        default=None, description="OpenAI API base URL (for OpenRouter or any OpenAI-compatible API)"
    )
    anthropic_api_key: Optional[str] = Field(default=None, description="Anthropic API key")

    # Chat
    chat_history_limit: int = Field(default=6, description="Chat messages to include in prompts")
    session_limit: int = Field(default=500, description="Max chat sessions kept in memory")
    session_history_limit: int = Field(default=50, ge=1, description="Max chat messages kept per session")

    # Title parser thresholds
    parser_heading_min_length: int = Field(
        default=15, description="Min length of numbered, quoted, header and bullet headings"
    )
    parser_bold_min_length: int = Field(default=20, description="Min length of bold headings")
    parser_plain_title_min_length: int = Field(
        default=30, description="Min length of a heading accepted without research vocabulary"
    )
    parser_lookahead_window: int = Field(
        default=7, description="Lines inspected after a heading for description and labels"
    )

    @property
    def model_chain(self) -> list[str]:
        """Configured chat models in fallback order."""
        return [item.strip() for item in self.chat_models.split(",") if item.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
