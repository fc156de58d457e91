"""
Correlation ID context manager.

Manages correlation ID propagation across async boundaries using contextvars.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

from contextvars import ContextVar
import uuid

correlation_id_ctx: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> str:
    """
    Set correlation ID in context.

    Args:
        correlation_id: Optional correlation ID (generates new if None)

    Returns:
        str: The correlation ID that was set
    """
    correlation_id = correlation_id or str(uuid.uuid4())
    correlation_id_ctx.set(correlation_id)
    return correlation_id


def get_correlation_id() -> str:
    """
    Get current correlation ID from context.

    Returns:
        str: Current correlation ID (empty string outside a request)
    """
    return correlation_id_ctx.get()


def clear_correlation_id() -> None:
    """Clear correlation ID from context."""
    correlation_id_ctx.set("")
