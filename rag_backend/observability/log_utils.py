"""
Structured log context for corpus events.

Context values are attached to records as `extra` fields. Document batches
and embedding vectors are summarized by size so article bodies and vectors
never reach the logs verbatim.

Dependencies: logging (stdlib)
System role: Log record enrichment
"""

import logging
from collections.abc import Mapping
from typing import Any

MAX_VALUE_LENGTH = 200


def summarize_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """Render one context value, collapsing collections to their size."""
    if isinstance(value, str):
        text = value
    elif isinstance(value, Mapping):
        text = f"dict({len(value)} keys)"
    elif isinstance(value, (list, tuple)):
        text = f"{type(value).__name__}({len(value)} items)"
    else:
        text = str(value)

    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    exc: BaseException | None = None,
    **context: Any,
) -> None:
    """
    Log a message with summarized context fields.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        exc: Exception whose type, message and traceback are attached
        **context: Extra fields, e.g. ingested=3, total_documents=10
    """
    extra = {key: summarize_value(value) for key, value in context.items()}
    if exc is not None:
        extra["error_type"] = type(exc).__name__
        extra["error_msg"] = str(exc)
    logger.log(level, message, extra=extra, exc_info=exc)
