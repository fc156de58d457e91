"""
Test suite for ChatService.

Tests context retrieval, prompt construction, generation and history
persistence. Uses a real Corpus with a stub embedder and mocked
generator/history store.

System role: Verification of chat service orchestration layer
"""

from unittest.mock import AsyncMock

import pytest

from rag_backend.application.services import ChatService
from rag_backend.core.corpus import Corpus, Document
from rag_backend.core.exceptions import GenerationError, HistoryStoreError, ValidationError
from rag_backend.models.history import HistoryEntry


@pytest.fixture
def chat_service(corpus: Corpus, animal_embedder, mock_generator: AsyncMock, mock_history_store: AsyncMock) -> ChatService:
    """Provide ChatService with mocked generator and history store."""
    return ChatService(
        corpus=corpus,
        embedder=animal_embedder,
        generator=mock_generator,
        history_store=mock_history_store,
        top_k=1,
    )


class TestChatServiceInit:
    """Test suite for ChatService initialization."""

    def test_init_should_store_collaborators(
        self, corpus: Corpus, animal_embedder, mock_generator: AsyncMock, mock_history_store: AsyncMock
    ) -> None:
        # Act
        service = ChatService(corpus, animal_embedder, mock_generator, mock_history_store)

        # Assert
        assert service.corpus is corpus
        assert service.generator is mock_generator
        assert service.history_store is mock_history_store
        assert service.top_k == 3


class TestChatServiceProcessChat:
    """Test suite for process_chat."""

    @pytest.mark.asyncio
    async def test_process_chat_should_use_retrieved_context(
        self, chat_service: ChatService, corpus: Corpus, animal_embedder, mock_generator: AsyncMock
    ) -> None:
        # Arrange
        corpus.ingest(["cat", "dog"], animal_embedder)

        # Act
        response = await chat_service.process_chat("s1", "kitten?")

        # Assert
        prompt = mock_generator.agenerate.call_args.args[0]
        assert prompt == "Use the following context to answer the question:\n\ncat\n\nQuestion: kitten?"
        assert response.response == "Generated answer."
        assert [source.text for source in response.sources] == ["cat"]

    @pytest.mark.asyncio
    async def test_process_chat_should_include_titles_in_context(
        self, chat_service: ChatService, corpus: Corpus, make_stub_embedder, mock_generator: AsyncMock
    ) -> None:
        # Arrange
        embedder = make_stub_embedder(default=[1.0, 0.0])
        corpus.ingest([Document(text="Leaders agreed.", title="Summit", source_link="https://example.com/s")], embedder)
        chat_service.embedder = embedder

        # Act
        response = await chat_service.process_chat("s1", "What happened?")

        # Assert
        assert "Summit. Leaders agreed." in mock_generator.agenerate.call_args.args[0]
        source = response.sources[0]
        assert source.title == "Summit"
        assert source.source_link == "https://example.com/s"
        assert source.distance == pytest.approx(0.0)

    @pytest.mark.asyncio
    async def test_process_chat_on_empty_corpus_should_answer_without_context(
        self, chat_service: ChatService, mock_generator: AsyncMock
    ) -> None:
        # Act
        response = await chat_service.process_chat("s1", "kitten?")

        # Assert
        assert mock_generator.agenerate.call_args.args[0].startswith("Answer the question directly")
        assert response.sources == []

    @pytest.mark.asyncio
    async def test_process_chat_should_record_exchange(
        self, chat_service: ChatService, mock_history_store: AsyncMock
    ) -> None:
        # Act
        await chat_service.process_chat("s1", "kitten?")

        # Assert
        mock_history_store.append.assert_awaited_once_with("s1", {"user": "kitten?", "bot": "Generated answer."})

    @pytest.mark.asyncio
    async def test_process_chat_should_honour_top_k_override(
        self, chat_service: ChatService, corpus: Corpus, animal_embedder
    ) -> None:
        # Arrange
        corpus.ingest(["cat", "dog", "fish"], animal_embedder)

        # Act
        response = await chat_service.process_chat("s1", "puppy?", top_k=2)

        # Assert
        assert [source.text for source in response.sources] == ["dog", "fish"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("session_id, query", [("", "q"), ("s1", ""), ("  ", "q"), ("s1", "   ")])
    async def test_process_chat_should_reject_missing_fields(
        self, chat_service: ChatService, mock_generator: AsyncMock, session_id: str, query: str
    ) -> None:
        with pytest.raises(ValidationError):
            await chat_service.process_chat(session_id, query)
        mock_generator.agenerate.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_generation_failure_should_not_record_history(
        self, chat_service: ChatService, mock_generator: AsyncMock, mock_history_store: AsyncMock
    ) -> None:
        # Arrange
        mock_generator.agenerate.side_effect = GenerationError("quota exceeded")

        # Act
        with pytest.raises(GenerationError):
            await chat_service.process_chat("s1", "kitten?")

        # Assert
        mock_history_store.append.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_history_failure_should_propagate(
        self, chat_service: ChatService, mock_history_store: AsyncMock
    ) -> None:
        mock_history_store.append.side_effect = HistoryStoreError("Failed to save message", session_id="s1")
        with pytest.raises(HistoryStoreError):
            await chat_service.process_chat("s1", "kitten?")


class TestChatServiceHistory:
    """Test suite for history retrieval and reset."""

    @pytest.mark.asyncio
    async def test_get_history_should_map_messages(
        self, chat_service: ChatService, mock_history_store: AsyncMock
    ) -> None:
        # Arrange
        mock_history_store.list_messages.return_value = [
            {"user": "q1", "bot": "a1"},
            {"user": "q2"},
        ]

        # Act
        history = await chat_service.get_history("s1")

        # Assert
        assert history == [HistoryEntry(user="q1", bot="a1"), HistoryEntry(user="q2", bot="")]

    @pytest.mark.asyncio
    async def test_reset_history_should_clear_store(
        self, chat_service: ChatService, mock_history_store: AsyncMock
    ) -> None:
        # Act
        cleared = await chat_service.reset_history("s1")

        # Assert
        assert cleared is True
        mock_history_store.clear.assert_awaited_once_with("s1")
