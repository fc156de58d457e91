"""
Service error handling utilities.

Provides a decorator that maps domain exceptions raised by the services
onto HTTPExceptions with consistent status codes and logging.

Dependencies: fastapi, rag_backend.core.exceptions
System role: Exception-to-HTTP mapping for all routers
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from rag_backend.core.exceptions import (
    EmbeddingProviderError,
    GenerationError,
    HistoryStoreError,
    RAGBackendException,
    ValidationError,
    VectorStoreError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_service_errors(failure_message: str) -> Callable[[F], F]:
    """
    Decorator factory mapping service exceptions onto HTTPExceptions.

    - ValidationError (including EmptyBatchError): 400 with the error message
    - EmbeddingProviderError, GenerationError: 502
    - VectorStoreError (dimension faults), HistoryStoreError: 500
    - Anything else: 500 with failure_message

    Args:
        failure_message: Client-facing message for unexpected failures

    Returns:
        Callable: Decorator for async route handlers
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)

            except HTTPException:
                raise

            except ValidationError as e:
                logger.warning("Invalid request", extra={"error": str(e)})
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

            except (EmbeddingProviderError, GenerationError) as e:
                logger.error("Upstream provider failure", extra={"error": str(e)})
                raise HTTPException(
                    status_code=status.HTTP_502_BAD_GATEWAY,
                    detail=f"{failure_message}: {e.message}",
                )

            except (VectorStoreError, HistoryStoreError) as e:
                logger.error("Storage failure", extra={"error": str(e)})
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=f"{failure_message}: {e.message}",
                )

            except RAGBackendException as e:
                logger.error("Service failure", extra={"error": str(e)})
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=failure_message,
                )

            except Exception as e:
                logger.exception("Unexpected failure", extra={"error": str(e)})
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=failure_message,
                )

        return wrapper  # type: ignore

    return decorator
