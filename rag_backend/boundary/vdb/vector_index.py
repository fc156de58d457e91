"""
Exact in-memory vector index backed by FAISS.

Brute-force squared-L2 nearest neighbour search over fixed-dimension
float32 vectors using faiss.IndexFlatL2. The index owns no document text;
callers map returned positions back to their own records.

The index is not synchronized. Corpus guards every call with its
read/write lock.

Dependencies: faiss-cpu, numpy, rag_backend.boundary.vdb.batching
System role: Storage and search primitive underneath the Corpus
"""

import logging
import numbers
from collections.abc import Sequence

import faiss

from rag_backend.boundary.vdb.batching import (
    DEFAULT_BATCH_SIZE,
    flatten_vectors,
    iter_batches,
    vector_width,
)
from rag_backend.boundary.vdb.vector_schemas import SearchHit
from rag_backend.core.exceptions import DimensionError, DimensionMismatchError

logger = logging.getLogger(__name__)


class VectorIndex:
    """
    Append-only exact L2 index over fixed-dimension vectors.

    The dimension is unset until initialize() is called and is fixed
    afterwards. Positions are assigned contiguously in append order.
    """

    def __init__(self, batch_size: int = DEFAULT_BATCH_SIZE) -> None:
        """
        Initialize an empty, dimensionless index.

        Args:
            batch_size: Maximum vectors marshalled per FAISS add() call
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self._batch_size = batch_size
        self._dimension: int | None = None
        self._index: faiss.IndexFlatL2 | None = None

    @property
    def dimension(self) -> int | None:
        """Vector width, or None before initialization."""
        return self._dimension

    @property
    def is_initialized(self) -> bool:
        return self._index is not None

    @property
    def batch_size(self) -> int:
        return self._batch_size

    def __len__(self) -> int:
        if self._index is None:
            return 0
        return int(self._index.ntotal)

    def initialize(self, dimension: int) -> None:
        """
        Fix the index dimension and allocate the FAISS index.

        Idempotent when called again with the same value.

        Args:
            dimension: Positive integer vector width

        Raises:
            DimensionError: If dimension is not a positive integer or differs
                from the already-initialized dimension
        """
        if isinstance(dimension, bool) or not isinstance(dimension, numbers.Integral):
            raise DimensionError("Dimension must be an integer", dimension=repr(dimension))
        dimension = int(dimension)
        if dimension <= 0:
            raise DimensionError("Dimension must be positive", dimension=dimension)

        if self._dimension is not None:
            if dimension != self._dimension:
                raise DimensionError(
                    f"Index already initialized with dimension {self._dimension}",
                    dimension=dimension,
                )
            return

        self._index = faiss.IndexFlatL2(dimension)
        self._dimension = dimension
        logger.info(f"{__name__}:initialize - FAISS IndexFlatL2 created with dim {dimension}")

    def append(self, vectors: Sequence[Sequence[float]]) -> int:
        """
        Append vectors to the end of the index, all or nothing.

        Vectors are handed to FAISS in chunks of batch_size; the result is
        the same as a single add of the whole batch.

        Args:
            vectors: Vectors of length dimension, in insertion order

        Returns:
            int: Position assigned to the first vector

        Raises:
            DimensionMismatchError: If the index is uninitialized or any vector
                has a different width (nothing is appended)
            VectorStoreError: If a vector holds non-numeric or non-finite values
        """
        if self._index is None:
            first_width = vector_width(vectors[0]) if len(vectors) else None
            raise DimensionMismatchError(expected=None, actual=first_width, operation="append")

        for vector in vectors:
            width = vector_width(vector)
            if width != self._dimension:
                raise DimensionMismatchError(
                    expected=self._dimension,
                    actual=width,
                    operation="append",
                )

        start = len(self)
        try:
            for chunk in iter_batches(vectors, self._batch_size):
                self._index.add(flatten_vectors(chunk, self._dimension))
        except Exception:
            logger.error(f"{__name__}:append - Failed after {len(self) - start} rows, rolling back to {start}")
            self.truncate(start)
            raise

        logger.debug(f"{__name__}:append - Added {len(vectors)} vectors at position {start}")
        return start

    def search(self, query: Sequence[float], k: int) -> list[SearchHit]:
        """
        Return the k nearest positions to query by squared L2 distance.

        Args:
            query: Query vector of length dimension
            k: Maximum number of hits (clamped to the index size)

        Returns:
            list[SearchHit]: Hits by ascending distance, ties by ascending position

        Raises:
            DimensionMismatchError: If the index is uninitialized or the query
                has a different width
        """
        width = vector_width(query)
        if self._index is None:
            raise DimensionMismatchError(expected=None, actual=width, operation="search")
        if width != self._dimension:
            raise DimensionMismatchError(expected=self._dimension, actual=width, operation="search")

        total = len(self)
        if total == 0 or k < 1:
            return []

        # IndexFlatL2 scans sequentially, so boundary ties keep the earliest positions
        k = min(int(k), total)
        distances, labels = self._index.search(flatten_vectors([query], self._dimension), k)

        hits = [
            SearchHit(position=int(label), distance=float(distance))
            for distance, label in zip(distances[0], labels[0])
            if label != -1
        ]
        hits.sort(key=lambda hit: (hit.distance, hit.position))
        return hits

    def truncate(self, length: int, release_dimension: bool = False) -> None:
        """
        Drop every vector at position >= length.

        Only used to roll back a failed ingestion step.

        Args:
            length: Number of leading vectors to keep
            release_dimension: Also forget the dimension (requires length 0)
        """
        if self._index is not None and len(self) > length:
            self._index.remove_ids(faiss.IDSelectorRange(length, len(self)))
        if release_dimension:
            if length != 0:
                raise ValueError("Dimension can only be released on an empty index")
            self._index = None
            self._dimension = None

    def __repr__(self) -> str:
        return f"VectorIndex(dimension={self._dimension}, size={len(self)})"
