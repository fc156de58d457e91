"""
Document corpus with a position-aligned vector index.

Owns the ordered document list and the VectorIndex and keeps them in
lock-step: document position i always corresponds to vector position i.
The corpus is append-only and lives for the process lifetime.

Flow (ingest):
1. Reject empty batches
2. Embed all texts in one provider call, outside the lock
3. Under the write lock: fix the dimension on first use, validate, append
   vectors and documents as one step (rolled back together on failure)

Flow (retrieve):
1. Embed the query
2. Degrade to empty context on empty corpus or unusable embedding
3. Search under the read lock and map positions back to documents

Dependencies: rag_backend.boundary.vdb, rag_backend.core.concurrency, rag_backend.core.exceptions
System role: Single writer path into the document store and vector index
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from rag_backend.boundary.vdb.batching import DEFAULT_BATCH_SIZE, compose_full_text, vector_width
from rag_backend.boundary.vdb.vector_index import VectorIndex
from rag_backend.core.concurrency import ReadWriteLock
from rag_backend.core.exceptions import (
    DimensionMismatchError,
    EmbeddingProviderError,
    EmptyBatchError,
    RAGBackendException,
)

logger = logging.getLogger(__name__)

EmbedFn = Callable[[list[str]], Sequence[Sequence[float]]]


@dataclass(frozen=True)
class Document:
    """Immutable corpus entry."""

    text: str
    title: str | None = None
    source_link: str | None = None

    @property
    def full_text(self) -> str:
        return compose_full_text(self.title, self.text)


@dataclass(frozen=True)
class RetrievedDocument:
    """Document returned by a search together with its match data."""

    document: Document
    position: int
    distance: float


def _to_document(item: Document | str | dict[str, Any]) -> Document:
    if isinstance(item, Document):
        return item
    if isinstance(item, str):
        return Document(text=item)
    if isinstance(item, dict):
        return Document(
            text=item["text"],
            title=item.get("title"),
            source_link=item.get("source_link") or item.get("sourceLink"),
        )
    raise TypeError(f"Cannot ingest item of type {type(item).__name__}")


class Corpus:
    """
    Thread-safe, append-only document store with exact vector search.

    Writers (ingest) take the lock exclusively; readers (retrieve) share it.
    The embedder is passed per call and never invoked while the lock is held.
    """

    def __init__(self, index: VectorIndex | None = None, batch_size: int = DEFAULT_BATCH_SIZE) -> None:
        """
        Initialize an empty corpus.

        Args:
            index: Empty VectorIndex to own (a new one is created if None)
            batch_size: Append chunk size for a newly created index
        """
        self._index = index if index is not None else VectorIndex(batch_size=batch_size)
        if len(self._index):
            raise ValueError("Corpus must start from an empty index")
        self._documents: list[Document] = []
        self._lock = ReadWriteLock()

    @property
    def dimension(self) -> int | None:
        with self._lock.read():
            return self._index.dimension

    @property
    def documents(self) -> tuple[Document, ...]:
        """Snapshot of all documents in position order."""
        with self._lock.read():
            return tuple(self._documents)

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._documents)

    def stats(self) -> dict[str, int | None]:
        """Return document count, index size and dimension from one snapshot."""
        with self._lock.read():
            return {
                "documents": len(self._documents),
                "vectors": len(self._index),
                "dimension": self._index.dimension,
            }

    def ingest(self, items: Sequence[Document | str | dict[str, Any]], embed: EmbedFn) -> int:
        """
        Embed and append a batch of documents atomically.

        Args:
            items: Documents, bare texts, or {text, title?, source_link?} dicts
            embed: Embedding function mapping a list of texts to vectors

        Returns:
            int: Number of documents ingested

        Raises:
            EmptyBatchError: If items is empty
            EmbeddingProviderError: If embed fails or returns a batch of the
                wrong length (corpus unchanged)
            DimensionError: If the first vector has an invalid width
            DimensionMismatchError: If any vector width differs from the
                corpus dimension (corpus unchanged)
        """
        if not items:
            raise EmptyBatchError()

        documents = [_to_document(item) for item in items]
        texts = [doc.full_text for doc in documents]

        vectors = self._embed(texts, embed)
        if len(vectors) != len(documents):
            raise EmbeddingProviderError(
                "Embedding provider returned a batch of the wrong length",
                details={"expected": len(documents), "actual": len(vectors)},
            )

        with self._lock.write():
            self._apply(documents, vectors)

        logger.info(f"{__name__}:ingest - Indexed {len(documents)} documents (total={len(self)})")
        return len(documents)

    def retrieve(self, query_text: str, k: int, embed: EmbedFn) -> list[str]:
        """
        Return the texts of the k documents nearest to query_text.

        Empty corpus, embedding failures and dimension mismatches yield an
        empty list rather than an error.

        Args:
            query_text: Natural-language query
            k: Maximum number of documents
            embed: Embedding function mapping a list of texts to vectors

        Returns:
            list[str]: Document texts, nearest first
        """
        return [hit.document.text for hit in self.retrieve_documents(query_text, k, embed)]

    def retrieve_documents(self, query_text: str, k: int, embed: EmbedFn) -> list[RetrievedDocument]:
        """
        Return the k documents nearest to query_text with their distances.

        Same degradation policy as retrieve().
        """
        try:
            vectors = self._embed([query_text], embed)
        except EmbeddingProviderError as e:
            logger.warning(f"{__name__}:retrieve - Query embedding failed, using empty context: {e}")
            return []

        if len(vectors) == 0 or vector_width(vectors[0]) is None:
            logger.warning(f"{__name__}:retrieve - Embedder returned no usable query vector")
            return []
        query_vector = vectors[0]

        with self._lock.read():
            if not self._documents:
                return []
            try:
                hits = self._index.search(query_vector, k)
            except DimensionMismatchError as e:
                logger.warning(f"{__name__}:retrieve - Query vector rejected, using empty context: {e}")
                return []
            except RAGBackendException as e:
                logger.warning(f"{__name__}:retrieve - Search failed, using empty context: {e}")
                return []
            documents = self._documents
            results = [
                RetrievedDocument(document=documents[hit.position], position=hit.position, distance=hit.distance)
                for hit in hits
                if 0 <= hit.position < len(documents)
            ]

        logger.debug(f"{__name__}:retrieve - {len(results)} results for k={k}")
        return results

    def _embed(self, texts: list[str], embed: EmbedFn) -> Sequence[Sequence[float]]:
        try:
            vectors = embed(texts)
        except EmbeddingProviderError:
            raise
        except Exception as e:
            raise EmbeddingProviderError(
                f"Embedding provider failed: {type(e).__name__}: {e}",
                details={"batch_size": len(texts)},
            ) from e

        if vectors is None:
            raise EmbeddingProviderError("Embedding provider returned no vectors")
        try:
            len(vectors)
        except TypeError as e:
            raise EmbeddingProviderError("Embedding provider returned a non-sequence") from e
        return vectors

    def _apply(self, documents: list[Document], vectors: Sequence[Sequence[float]]) -> None:
        """Append vectors and documents together. Caller holds the write lock."""
        initialized_here = False
        if not self._index.is_initialized:
            self._index.initialize(vector_width(vectors[0]))
            initialized_here = True
            logger.info(f"{__name__}:ingest - Corpus dimension set to {self._index.dimension}")

        start = len(self._index)
        try:
            self._index.append(vectors)
            self._documents.extend(documents)
        except BaseException:
            del self._documents[start:]
            self._index.truncate(start, release_dimension=initialized_here)
            raise
