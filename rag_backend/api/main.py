"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, rag_backend.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rag_backend.api.deps.dependencies import get_service_cache
from rag_backend.configs import get_settings
from rag_backend.observability import configure_logging
from rag_backend.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import (
    chat_router,
    health_router,
    history_router,
    ingest_router,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger = logging.getLogger("uvicorn")

    # Startup
    logger.info("Pre-warming service cache...")
    cache = get_service_cache()
    _ = cache.corpus
    _ = cache.history_store
    _ = cache.feed_fetcher
    logger.info("Service cache pre-warmed")

    if not settings.feed.auto_ingest:
        logger.info("Initial ingestion disabled")
    elif not settings.gemini.has_api_key:
        logger.warning("No Gemini key configured, starting with an empty corpus")
    else:
        await cache.ingestion_service().bootstrap(cache.feed_fetcher, limit=settings.feed.limit)

    yield

    # Shutdown
    await cache.aclose()
    cache.clear()
    logger.info("Service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()
    app = FastAPI(
        title="RAG Chat API",
        description="Retrieval-augmented news chat over an in-memory FAISS corpus",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Add CORS middleware
    origins = [settings.server.cors_origin] if settings.server.cors_origin else ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=origins != ["*"],
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(ingest_router, prefix="/api/v1")
    app.include_router(chat_router, prefix="/api/v1")
    app.include_router(history_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    server_settings = get_settings().server
    uvicorn.run(
        "rag_backend.api.main:app",
        host=server_settings.host,
        port=server_settings.port,
    )
