"""Single-shot AI endpoint models."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class AIRequest(BaseModel):
    """Body of ``POST /api/ai``; ``prompt`` and ``message`` are interchangeable."""

    model_config = ConfigDict(populate_by_name=True)

    prompt: Optional[str] = Field(default=None, description="User prompt")
    message: Optional[str] = Field(default=None, description="Alias of prompt used by older clients")
    context: Optional[Any] = Field(default=None, description="Opaque client context, logged only")
    image_data: Optional[str] = Field(default=None, alias="imageData", description="Base64 image data")

    @property
    def text(self) -> str:
        return self.prompt or self.message or ""
