"""Scripted chat models for service tests."""

from typing import Any, Callable, Dict, List, Optional


class MockMessage:
    def __init__(self, content: Any):
        self.content = content


class ScriptedChatModel:
    """Chat model double that replays canned responses or raises."""

    def __init__(self, responses: List[Any] | None = None, error: Optional[Exception] = None):
        self.responses = responses or ["Mock response"]
        self.error = error
        self.call_count = 0
        self.prompts: List[str] = []

    async def ainvoke(self, messages: List[Any]) -> MockMessage:
        """Mock async invocation."""
        self.call_count += 1
        self.prompts.append(str(messages[-1].content))
        if self.error is not None:
            raise self.error

        response_idx = min(self.call_count - 1, len(self.responses) - 1)
        return MockMessage(self.responses[response_idx])


def scripted_factory(models: Dict[str, ScriptedChatModel]) -> Callable[..., ScriptedChatModel]:
    """Model factory that hands out the scripted model registered for each model string."""

    def factory(model_str: str, settings: Any, max_tokens: int, temperature: float = 0.7):
        if model_str not in models:
            raise ValueError(f"Unsupported LLM provider: {model_str}")
        return models[model_str]

    return factory
