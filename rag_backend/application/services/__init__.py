"""
Application services.

- IngestionService: write path into the shared corpus
- ChatService: retrieval, generation and session history
"""

from rag_backend.application.services.chat_service import ChatService
from rag_backend.application.services.ingestion_service import IngestionService

__all__ = ["ChatService", "IngestionService"]
