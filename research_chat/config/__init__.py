"""Configuration and logging setup."""

from research_chat.config.logging_config import configure_logging
from research_chat.config.settings import Settings, get_settings

__all__ = ["Settings", "configure_logging", "get_settings"]
