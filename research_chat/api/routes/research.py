"""Research title selection endpoint."""

import structlog
from fastapi import APIRouter, HTTPException, Request

from research_chat.api.models.research import SelectionResponse, SelectRequest
from research_chat.exceptions import UnknownSuggestionError
from research_chat.research.details import suggestion_details

router = APIRouter(prefix="/api/research", tags=["research"])
logger = structlog.get_logger(__name__)


@router.post("/{session_id}/select", response_model=SelectionResponse)
async def select_title(session_id: str, body: SelectRequest, request: Request) -> SelectionResponse:
    """Pick one of the titles suggested in the session."""
    session = request.app.state.session_store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Session {session_id} not found")

    chat_service = request.app.state.chat_service
    try:
        turn = chat_service.select_title(session, body.id)
    except UnknownSuggestionError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    suggestion = session.selected_title
    return SelectionResponse(turn=turn, suggestion=suggestion, details=suggestion_details(suggestion))
