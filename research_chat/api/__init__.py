"""HTTP API."""

from research_chat.api.app import create_app

__all__ = ["create_app"]
