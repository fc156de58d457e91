"""
Exception hierarchy for the RAG chat backend.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class RAGBackendException(Exception):
    """Base exception for all RAG backend errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(RAGBackendException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class EmptyBatchError(ValidationError):
    """Raised when an ingestion batch contains no items."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("No documents provided", field="docs", details=details)


class VectorStoreError(RAGBackendException):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (initialize, append, search)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class DimensionError(VectorStoreError):
    """Raised when the index dimension is invalid or cannot be (re)assigned."""

    def __init__(
        self,
        message: str,
        dimension: Any = None,
        operation: str | None = "initialize",
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize dimension error.

        Args:
            message: Error message
            dimension: Offending dimension value
            operation: Operation that failed
            details: Additional context
        """
        details = details or {}
        if dimension is not None:
            details["dimension"] = dimension
        super().__init__(message, operation, details)


class DimensionMismatchError(DimensionError):
    """Raised when a vector's width differs from the index dimension."""

    def __init__(
        self,
        expected: int | None,
        actual: int | None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize dimension mismatch error.

        Args:
            expected: Index dimension (None when the index is uninitialized)
            actual: Width of the offending vector
            operation: Operation that failed (append, search)
            details: Additional context
        """
        details = details or {}
        details["expected"] = expected
        details["actual"] = actual
        if expected is None:
            message = "Vector index is not initialized"
        else:
            message = f"Expected vectors of dimension {expected}, got {actual}"
        self.expected = expected
        self.actual = actual
        super().__init__(message, operation=operation, details=details)


class EmbeddingProviderError(RAGBackendException):
    """Raised when the embedding provider fails or returns an unusable batch."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize embedding provider error.

        Args:
            message: Error message
            provider: Name of the embedding provider
            details: Additional context
        """
        details = details or {}
        if provider:
            details["provider"] = provider
        super().__init__(message, details)


class GenerationError(RAGBackendException):
    """Raised when the text generation provider fails."""

    pass


class HistoryStoreError(RAGBackendException):
    """Raised when session history operations fail."""

    def __init__(
        self,
        message: str,
        session_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize history store error.

        Args:
            message: Error message
            session_id: Session whose history could not be read or written
            details: Additional context
        """
        details = details or {}
        if session_id:
            details["session_id"] = session_id
        super().__init__(message, details)


class FeedFetchError(RAGBackendException):
    """Raised when the article feed cannot be fetched or parsed."""

    pass
