"""Session history API endpoints.

Routes:
- GET /history/{session_id} - List a session's exchanges
- DELETE /reset/{session_id} - Clear a session's exchanges

Dependencies: rag_backend.application.services.chat_service
System role: Session history HTTP API
"""

from fastapi import APIRouter, Depends

from rag_backend.api.deps import get_chat_service
from rag_backend.api.routers.router_utils import handle_service_errors
from rag_backend.application.services import ChatService
from rag_backend.models.history import HistoryResponse, ResetResponse

router = APIRouter(tags=["history"])


@router.get("/history/{session_id}", response_model=HistoryResponse)
@handle_service_errors("Failed to fetch history")
async def get_history(
    session_id: str,
    chat_service: ChatService = Depends(get_chat_service),
) -> HistoryResponse:
    """Return all exchanges of a session, oldest first."""
    history = await chat_service.get_history(session_id)
    return HistoryResponse(session_id=session_id, history=history)


@router.delete("/reset/{session_id}", response_model=ResetResponse)
@handle_service_errors("Failed to reset session")
async def reset_session(
    session_id: str,
    chat_service: ChatService = Depends(get_chat_service),
) -> ResetResponse:
    """Delete a session's history."""
    await chat_service.reset_history(session_id)
    return ResetResponse(message=f"Session {session_id} cleared")
