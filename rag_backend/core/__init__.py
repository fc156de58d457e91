"""
Core business logic module.

Contains the document corpus (rag_backend.core.corpus), its synchronization
primitive, prompt construction and the exception hierarchy.
"""

from rag_backend.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    EmbeddingProviderError,
    EmptyBatchError,
    FeedFetchError,
    GenerationError,
    HistoryStoreError,
    RAGBackendException,
    ValidationError,
    VectorStoreError,
)

__all__ = [
    "RAGBackendException",
    "ValidationError",
    "EmptyBatchError",
    "VectorStoreError",
    "DimensionError",
    "DimensionMismatchError",
    "EmbeddingProviderError",
    "GenerationError",
    "HistoryStoreError",
    "FeedFetchError",
]
