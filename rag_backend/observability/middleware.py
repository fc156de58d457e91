"""
FastAPI middleware for observability.

Correlation ID and request logging middleware.

Dependencies: fastapi, starlette, rag_backend.observability
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from rag_backend.observability.correlation import clear_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests and responses."""

    async def dispatch(self, request: Request, call_next):
        """
        Log HTTP request and response with timing.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response object
        """
        start_time = time.perf_counter()
        method = request.method
        path = request.url.path

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{method} {path} - Exception",
                extra={
                    "method": method,
                    "path": path,
                    "process_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
                    "error_type": type(e).__name__,
                },
            )
            raise

        logger.info(
            f"{method} {path} - {response.status_code}",
            extra={
                "method": method,
                "path": path,
                "status_code": response.status_code,
                "process_time_ms": round((time.perf_counter() - start_time) * 1000, 2),
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Middleware for correlation ID injection."""

    async def dispatch(self, request: Request, call_next):
        """
        Inject correlation ID into request context.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response with correlation ID header
        """
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
