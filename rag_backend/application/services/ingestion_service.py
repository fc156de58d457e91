"""
Ingestion service for building the document corpus.

Turns raw texts, API documents and feed articles into corpus documents and
hands them to the Corpus. The Corpus is synchronous (lock-guarded, blocking
embedding call), so every call runs in the threadpool to keep the event
loop free.

Dependencies: starlette, rag_backend.core, rag_backend.boundary.feeds
System role: Write path orchestration for the corpus
"""

import logging
from collections.abc import Iterable, Sequence

from starlette.concurrency import run_in_threadpool

from rag_backend.boundary.embeddings import Embedder
from rag_backend.boundary.feeds import Article, RSSFeedFetcher
from rag_backend.core.corpus import Corpus, Document
from rag_backend.core.exceptions import RAGBackendException, ValidationError
from rag_backend.models.document import CorpusStats, IngestDocument
from rag_backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


def article_to_document(article: Article) -> Document:
    """Map a feed article onto a corpus document."""
    return Document(text=article.content, title=article.title or None, source_link=article.link)


def to_document(item: str | IngestDocument | Document) -> Document:
    """
    Map a request item onto a corpus document.

    Raises:
        ValidationError: If a plain text or request document has blank text
    """
    if isinstance(item, Document):
        return item
    if isinstance(item, IngestDocument):
        text, title, source_link = item.text, item.title, item.source_link
    else:
        text, title, source_link = item, None, None
    if not text.strip():
        raise ValidationError("Documents must have non-empty text", field="docs")
    return Document(text=text, title=title, source_link=source_link)


class IngestionService:
    """
    Ingestion service for the shared corpus.

    Owns no state of its own; the Corpus passed in is shared with ChatService.
    """

    def __init__(self, corpus: Corpus, embedder: Embedder) -> None:
        """
        Initialize ingestion service.

        Args:
            corpus: Shared corpus instance
            embedder: Embedding function used for every batch
        """
        self.corpus = corpus
        self.embedder = embedder

    async def ingest(self, items: Sequence[str | IngestDocument | Document]) -> int:
        """
        Embed and index a batch of documents.

        Args:
            items: Plain texts, request documents or corpus documents

        Returns:
            int: Number of documents ingested

        Raises:
            EmptyBatchError: If items is empty
            ValidationError: If a text or request document is blank
            EmbeddingProviderError: If embedding fails (corpus unchanged)
            DimensionError: If vectors do not fit the corpus dimension
        """
        documents = [to_document(item) for item in items]
        count = await run_in_threadpool(self.corpus.ingest, documents, self.embedder)
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:ingest - Ingested {count} documents",
            ingested=count,
            total_documents=len(self.corpus),
        )
        return count

    async def ingest_texts(self, texts: Sequence[str]) -> int:
        """Ingest plain texts without titles or links."""
        return await self.ingest(list(texts))

    async def ingest_articles(self, articles: Iterable[Article]) -> int:
        """Ingest feed articles, embedding "title. content"."""
        return await self.ingest([article_to_document(article) for article in articles])

    async def bootstrap(self, fetcher: RSSFeedFetcher, limit: int = 50) -> int:
        """
        Seed the corpus from the article feed at startup.

        Failures are logged and swallowed so the server still starts, with
        an empty corpus if nothing could be ingested.

        Args:
            fetcher: Feed fetcher (falls back to static articles itself)
            limit: Maximum number of articles

        Returns:
            int: Number of documents ingested (0 on failure)
        """
        articles = await fetcher.fetch(limit=limit)
        try:
            count = await self.ingest_articles(articles)
        except RAGBackendException as e:
            log_with_context(
                logger,
                logging.ERROR,
                f"{__name__}:bootstrap - Initial ingestion failed, starting with empty corpus",
                exc=e,
                articles=len(articles),
            )
            return 0

        logger.info(f"{__name__}:bootstrap - Vector store initialized with {count} articles")
        return count

    def stats(self) -> CorpusStats:
        """Return document count, vector count and dimension."""
        return CorpusStats(**self.corpus.stats())
