"""Single-shot AI endpoint used by the plain chat widget."""

import structlog
from fastapi import APIRouter, Request
from pydantic import ValidationError

from research_chat.api.models.ai import AIRequest
from research_chat.chat.service import SYSTEM_ERROR_REPLY
from research_chat.models.chat import AIResponse

router = APIRouter(prefix="/api", tags=["ai"])
logger = structlog.get_logger(__name__)


@router.post("/ai", response_model=AIResponse)
async def ask_ai(request: Request) -> AIResponse:
    """
    Answer one prompt through the model chain.

    The body is parsed by hand so that a malformed request still gets a
    regular reply instead of a 422.
    """
    try:
        payload = AIRequest.model_validate(await request.json())
    except (ValueError, ValidationError) as exc:
        logger.warning("Invalid AI request body", error=str(exc))
        return AIResponse(text=SYSTEM_ERROR_REPLY)

    logger.info(
        "AI request received",
        prompt=payload.text[:50],
        has_context=payload.context is not None,
        has_image=bool(payload.image_data),
    )

    chat_service = request.app.state.chat_service
    return await chat_service.generate(payload.text, image_data=payload.image_data)
