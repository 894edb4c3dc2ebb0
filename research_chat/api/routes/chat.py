"""Session-based chat endpoint with the research assistant flow."""

import structlog
from fastapi import APIRouter, Request

from research_chat.api.models.research import ChatRequest
from research_chat.models.chat import ChatTurn

router = APIRouter(prefix="/api/chat", tags=["chat"])
logger = structlog.get_logger(__name__)


@router.post("/{session_id}", response_model=ChatTurn)
async def send_message(session_id: str, body: ChatRequest, request: Request) -> ChatTurn:
    """Send one message and get the assistant turn back."""
    session = request.app.state.session_store.get_or_create(session_id)
    logger.info("Chat message", session_id=session_id, message=body.message[:100], step=session.step.value)

    chat_service = request.app.state.chat_service
    return await chat_service.handle_message(session, body.message)
