"""Chat API endpoints.

Routes:
- POST /chat - Answer a question with retrieved context and record it in the session

Dependencies: rag_backend.application.services.chat_service
System role: Chat messaging HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from rag_backend.api.deps import get_chat_service
from rag_backend.api.routers.router_utils import handle_service_errors
from rag_backend.application.services import ChatService
from rag_backend.models.chat import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


@router.post("/chat", response_model=ChatResponse)
@handle_service_errors("Failed to generate answer")
async def chat(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Answer a question for a session.

    Flow:
    1. Retrieve context documents from the corpus (empty on retrieval faults)
    2. Generate the answer
    3. Append the exchange to the session history

    Raises:
        HTTPException(400): session_id or query missing
        HTTPException(502): Generation provider failure
        HTTPException(500): History store failure
    """
    return await chat_service.process_chat(session_id=request.session_id, query=request.query)
