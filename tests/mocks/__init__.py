"""Mock objects for testing."""

from tests.mocks.mock_llm import ScriptedChatModel, scripted_factory

__all__ = ["ScriptedChatModel", "scripted_factory"]
