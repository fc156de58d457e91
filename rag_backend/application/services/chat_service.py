"""
Chat service for retrieval-augmented Q&A.

Orchestrates the chat flow: context retrieval, prompt construction,
generation and history persistence.

Dependencies: starlette, rag_backend.core, rag_backend.boundary
System role: Chat service orchestration layer
"""

import logging

from starlette.concurrency import run_in_threadpool

from rag_backend.boundary.embeddings import Embedder
from rag_backend.boundary.history import RedisHistoryStore
from rag_backend.boundary.llm import GeminiGenerator
from rag_backend.core.corpus import Corpus
from rag_backend.core.exceptions import ValidationError
from rag_backend.core.prompt_builder import build_prompt
from rag_backend.models.chat import ChatResponse, Source
from rag_backend.models.history import HistoryEntry

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 3


class ChatService:
    """
    Chat service for single-turn RAG answers with session history.

    History is recorded per session but not fed back into the prompt.
    """

    def __init__(
        self,
        corpus: Corpus,
        embedder: Embedder,
        generator: GeminiGenerator,
        history_store: RedisHistoryStore,
        top_k: int = DEFAULT_TOP_K,
    ) -> None:
        """
        Initialize chat service.

        Args:
            corpus: Shared corpus instance
            embedder: Embedding function for queries
            generator: Answer generator
            history_store: Session history store
            top_k: Default number of context documents
        """
        self.corpus = corpus
        self.embedder = embedder
        self.generator = generator
        self.history_store = history_store
        self.top_k = top_k

    async def process_chat(self, session_id: str, query: str, top_k: int | None = None) -> ChatResponse:
        """
        Answer a query and record the exchange.

        Flow:
        1. Validate session ID and query
        2. Retrieve the nearest documents (empty context on any retrieval fault)
        3. Build the prompt and generate an answer
        4. Append {user, bot} to the session history
        5. Return answer with sources

        Args:
            session_id: Conversation session key
            query: User question
            top_k: Number of context documents (service default if None)

        Returns:
            ChatResponse: Answer and the documents used as context

        Raises:
            ValidationError: If session_id or query is blank
            GenerationError: If the generator fails
            HistoryStoreError: If the exchange cannot be saved
        """
        if not session_id or not session_id.strip():
            raise ValidationError("Missing session_id or query", field="session_id")
        if not query or not query.strip():
            raise ValidationError("Missing session_id or query", field="query")

        k = top_k if top_k is not None else self.top_k
        logger.info(f"{__name__}:process_chat - START session_id={session_id} k={k}")

        retrieved = await run_in_threadpool(self.corpus.retrieve_documents, query, k, self.embedder)
        logger.info(f"{__name__}:process_chat - Retrieved {len(retrieved)} context documents")

        prompt = build_prompt(query, [hit.document.full_text for hit in retrieved])
        answer = await self.generator.agenerate(prompt)

        await self.history_store.append(session_id, {"user": query, "bot": answer})

        sources = [
            Source(
                text=hit.document.text,
                title=hit.document.title,
                source_link=hit.document.source_link,
                distance=hit.distance,
            )
            for hit in retrieved
        ]
        return ChatResponse(session_id=session_id, query=query, response=answer, sources=sources)

    async def get_history(self, session_id: str) -> list[HistoryEntry]:
        """
        Return a session's exchanges, oldest first.

        Raises:
            HistoryStoreError: If the store is unavailable
        """
        messages = await self.history_store.list_messages(session_id)
        return [
            HistoryEntry(user=str(message.get("user", "")), bot=str(message.get("bot", "")))
            for message in messages
        ]

    async def reset_history(self, session_id: str) -> bool:
        """
        Delete a session's history.

        Returns:
            bool: True if the session had history
        """
        cleared = await self.history_store.clear(session_id)
        logger.info(f"{__name__}:reset_history - session_id={session_id} cleared={cleared}")
        return cleared
