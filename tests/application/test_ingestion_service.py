"""
Test suite for IngestionService.

Runs against a real Corpus with stub embedders; the feed fetcher is mocked.

System role: Verification of the corpus write path orchestration
"""

from unittest.mock import AsyncMock

import pytest

from rag_backend.application.services import IngestionService
from rag_backend.boundary.feeds import Article
from rag_backend.core.corpus import Corpus
from rag_backend.core.exceptions import EmbeddingProviderError, EmptyBatchError, ValidationError
from rag_backend.models.document import CorpusStats, IngestDocument


@pytest.fixture
def embedder(make_stub_embedder):
    """Provide embedder mapping every text to the same 3-d vector."""
    return make_stub_embedder(default=[0.5, 0.5, 0.5])


@pytest.fixture
def service(corpus: Corpus, embedder) -> IngestionService:
    """Provide IngestionService over the shared test corpus."""
    return IngestionService(corpus=corpus, embedder=embedder)


class TestIngestionServiceIngest:
    """Test suite for ingesting request documents."""

    @pytest.mark.asyncio
    async def test_ingest_should_accept_texts_and_documents(self, service: IngestionService, corpus: Corpus) -> None:
        # Arrange
        items = [
            "plain text",
            IngestDocument(text="Body", title="Title", source_link="https://example.com/x"),
        ]

        # Act
        count = await service.ingest(items)

        # Assert
        assert count == 2
        documents = corpus.documents
        assert documents[0].text == "plain text"
        assert documents[1].title == "Title"
        assert documents[1].source_link == "https://example.com/x"

    @pytest.mark.asyncio
    async def test_ingest_empty_should_raise(self, service: IngestionService) -> None:
        with pytest.raises(EmptyBatchError):
            await service.ingest([])

    @pytest.mark.asyncio
    @pytest.mark.parametrize("blank", ["", "   ", IngestDocument(text="", title="Headline")])
    async def test_ingest_blank_text_should_raise_before_embedding(
        self, service: IngestionService, corpus: Corpus, embedder, blank
    ) -> None:
        # Act
        with pytest.raises(ValidationError):
            await service.ingest(["valid", blank])

        # Assert
        assert embedder.calls == []
        assert len(corpus) == 0

    @pytest.mark.asyncio
    async def test_ingest_texts_should_embed_plain_texts(self, service: IngestionService, embedder) -> None:
        # Act
        await service.ingest_texts(["one", "two"])

        # Assert
        assert embedder.calls == [["one", "two"]]

    @pytest.mark.asyncio
    async def test_ingest_articles_should_embed_title_and_content(
        self, service: IngestionService, corpus: Corpus, embedder
    ) -> None:
        # Arrange
        articles = [Article(title="Summit ends", content="Leaders agreed.", link="https://example.com/s")]

        # Act
        await service.ingest_articles(articles)

        # Assert
        assert embedder.calls == [["Summit ends. Leaders agreed."]]
        assert corpus.documents[0].source_link == "https://example.com/s"

    @pytest.mark.asyncio
    async def test_stats_should_reflect_corpus(self, service: IngestionService) -> None:
        # Arrange
        await service.ingest_texts(["a", "b"])

        # Act
        stats = service.stats()

        # Assert
        assert stats == CorpusStats(documents=2, vectors=2, dimension=3)


class TestIngestionServiceBootstrap:
    """Test suite for startup ingestion."""

    @pytest.mark.asyncio
    async def test_bootstrap_should_ingest_fetched_articles(self, service: IngestionService, corpus: Corpus) -> None:
        # Arrange
        fetcher = AsyncMock()
        fetcher.fetch = AsyncMock(
            return_value=[Article(title="A", content="first"), Article(title="B", content="second")]
        )

        # Act
        count = await service.bootstrap(fetcher, limit=10)

        # Assert
        fetcher.fetch.assert_awaited_once_with(limit=10)
        assert count == 2
        assert len(corpus) == 2

    @pytest.mark.asyncio
    async def test_bootstrap_should_swallow_embedding_failures(self, corpus: Corpus) -> None:
        # Arrange
        def broken(texts):
            raise EmbeddingProviderError("provider down")

        service = IngestionService(corpus=corpus, embedder=broken)
        fetcher = AsyncMock()
        fetcher.fetch = AsyncMock(return_value=[Article(title="A", content="first")])

        # Act
        count = await service.bootstrap(fetcher)

        # Assert
        assert count == 0
        assert len(corpus) == 0
