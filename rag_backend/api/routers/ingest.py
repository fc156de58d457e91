"""Ingestion API endpoints.

Routes:
- POST /ingest - Embed and index a batch of documents

Dependencies: rag_backend.application.services.ingestion_service
System role: Corpus write HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from rag_backend.api.deps import get_ingestion_service
from rag_backend.api.routers.router_utils import handle_service_errors
from rag_backend.application.services import IngestionService
from rag_backend.models.document import IngestRequest, IngestResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["ingest"])


@router.post("/ingest", response_model=IngestResponse)
@handle_service_errors("Failed to ingest documents")
async def ingest(
    request: IngestRequest,
    ingestion_service: IngestionService = Depends(get_ingestion_service),
) -> IngestResponse:
    """Embed and index documents.

    Args:
        request: IngestRequest with plain texts or {text, title?, source_link?} documents
        ingestion_service: Injected IngestionService

    Returns:
        IngestResponse: Count ingested and corpus size

    Raises:
        HTTPException(400): No documents provided
        HTTPException(502): Embedding provider failure (corpus unchanged)
        HTTPException(500): Dimension fault
    """
    count = await ingestion_service.ingest(request.docs)
    return IngestResponse(
        message=f"Ingested {count} documents",
        ingested=count,
        total_documents=ingestion_service.stats().documents,
    )
