"""
Health check API endpoints.

Routes: GET /health, GET /health/vector-store, GET /health/history-store,
GET /health/key-check

Dependencies: rag_backend.api.deps, rag_backend.configs
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from rag_backend.api.deps import get_corpus, get_history_store, get_settings_dependency
from rag_backend.configs import Settings
from rag_backend.models.document import CorpusStats


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


class VectorStoreHealthResponse(HealthResponse):
    """Vector store health with corpus size."""

    stats: CorpusStats


class KeyCheckResponse(BaseModel):
    """Whether provider keys are configured. Never carries the key itself."""

    gemini: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="RAG chat backend is running")


@router.get("/vector-store", response_model=VectorStoreHealthResponse)
async def health_check_vector_store(corpus=Depends(get_corpus)) -> VectorStoreHealthResponse:
    """Vector store health check with document and vector counts."""
    stats = CorpusStats(**corpus.stats())
    message = "Vector store empty" if stats.documents == 0 else f"{stats.documents} documents indexed"
    return VectorStoreHealthResponse(status="healthy", message=message, stats=stats)


@router.get("/history-store", response_model=HealthResponse)
async def health_check_history_store(
    response: Response,
    history_store=Depends(get_history_store),
) -> HealthResponse:
    """Session history store health check."""
    if await history_store.ping():
        return HealthResponse(status="healthy", message="History store connection OK")
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthResponse(status="unhealthy", message="History store unreachable")


@router.get("/key-check", response_model=KeyCheckResponse)
async def key_check(settings: Settings = Depends(get_settings_dependency)) -> KeyCheckResponse:
    """Report whether the Gemini API key is configured."""
    return KeyCheckResponse(gemini="Key Loaded" if settings.gemini.has_api_key else "No Gemini Key")
