"""
Batching and flattening helpers for vector ingestion.

Splits large vector batches into bounded chunks and marshals each chunk
into the contiguous float32 matrix layout expected by FAISS.

Dependencies: numpy
System role: Memory-bounded marshalling between Python vectors and FAISS
"""

from collections.abc import Iterator, Sequence
from typing import TypeVar

import numpy as np

from rag_backend.core.exceptions import DimensionMismatchError, VectorStoreError

T = TypeVar("T")

DEFAULT_BATCH_SIZE = 64


def iter_batches(items: Sequence[T], batch_size: int = DEFAULT_BATCH_SIZE) -> Iterator[Sequence[T]]:
    """
    Yield contiguous slices of at most batch_size items.

    Args:
        items: Sequence to split
        batch_size: Maximum slice length (must be positive)

    Yields:
        Sequence[T]: Consecutive slices preserving input order
    """
    if batch_size < 1:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    for start in range(0, len(items), batch_size):
        yield items[start : start + batch_size]


def vector_width(vector: Sequence[float]) -> int | None:
    """Return the length of a vector-like object, or None if it has none."""
    if isinstance(vector, (str, bytes)):
        return None
    try:
        return len(vector)
    except TypeError:
        return None


def flatten_vectors(vectors: Sequence[Sequence[float]], dimension: int) -> np.ndarray:
    """
    Marshal a chunk of vectors into a (n, dimension) float32 matrix.

    Args:
        vectors: Vectors to marshal, each of length dimension
        dimension: Expected vector width

    Returns:
        np.ndarray: C-contiguous float32 matrix

    Raises:
        DimensionMismatchError: If any vector has a different width
        VectorStoreError: If a component is non-numeric or non-finite
    """
    for vector in vectors:
        width = vector_width(vector)
        if width != dimension:
            raise DimensionMismatchError(expected=dimension, actual=width, operation="append")

    if len(vectors) == 0:
        return np.empty((0, dimension), dtype=np.float32)

    try:
        matrix = np.asarray(vectors, dtype=np.float32).reshape(len(vectors), dimension)
    except (TypeError, ValueError) as e:
        raise VectorStoreError(
            "Vectors must contain only numbers",
            operation="append",
            details={"error": str(e)},
        ) from e

    if not np.isfinite(matrix).all():
        raise VectorStoreError("Vectors must contain only finite numbers", operation="append")

    return np.ascontiguousarray(matrix)


def compose_full_text(title: str | None, text: str) -> str:
    """
    Build the text embedded and shown as context for one document.

    Args:
        title: Optional document title
        text: Document body

    Returns:
        str: "title. text" when a title is present, otherwise text
    """
    if title:
        return f"{title}. {text}"
    return text
