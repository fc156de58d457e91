"""
Dependency injection container.

Factory functions for FastAPI dependencies. The Corpus and all provider
clients are process-wide singletons held by the ServiceCache; services are
cheap per-request wrappers around them.

Dependencies: rag_backend.configs, rag_backend.application, rag_backend.boundary, rag_backend.core
System role: DI container for service injection
"""

from functools import lru_cache

from rag_backend.application.services import ChatService, IngestionService
from rag_backend.configs import Settings, get_settings


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._corpus = None
        self._embedder = None
        self._generator = None
        self._history_store = None
        self._feed_fetcher = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def corpus(self):
        """Get cached corpus (shared by ingestion and chat)."""
        if self._corpus is None:
            from rag_backend.core.corpus import Corpus

            self._corpus = Corpus(batch_size=self.settings.vector_store.batch_size)
        return self._corpus

    @property
    def embedder(self):
        """Get cached Gemini embedder."""
        if self._embedder is None:
            from rag_backend.boundary.embeddings import GeminiEmbedder

            gemini = self.settings.gemini
            self._embedder = GeminiEmbedder(
                api_key=gemini.api_key,
                model=gemini.embedding_model,
                output_dimensionality=gemini.embedding_dimension,
                max_attempts=gemini.max_retries,
            )
        return self._embedder

    @property
    def generator(self):
        """Get cached Gemini generator."""
        if self._generator is None:
            from rag_backend.boundary.llm import GeminiGenerator

            gemini = self.settings.gemini
            self._generator = GeminiGenerator(
                api_key=gemini.api_key,
                model=gemini.chat_model,
                temperature=gemini.temperature,
                timeout=gemini.timeout,
            )
        return self._generator

    @property
    def history_store(self):
        """Get cached Redis history store."""
        if self._history_store is None:
            from rag_backend.boundary.history import RedisHistoryStore

            redis = self.settings.redis
            self._history_store = RedisHistoryStore.from_url(redis.url, socket_timeout=redis.socket_timeout)
        return self._history_store

    @property
    def feed_fetcher(self):
        """Get cached RSS feed fetcher."""
        if self._feed_fetcher is None:
            from rag_backend.boundary.feeds import RSSFeedFetcher

            feed = self.settings.feed
            self._feed_fetcher = RSSFeedFetcher(url=feed.url, timeout=feed.timeout)
        return self._feed_fetcher

    def ingestion_service(self) -> IngestionService:
        return IngestionService(corpus=self.corpus, embedder=self.embedder)

    def chat_service(self) -> ChatService:
        return ChatService(
            corpus=self.corpus,
            embedder=self.embedder,
            generator=self.generator,
            history_store=self.history_store,
            top_k=self.settings.vector_store.top_k,
        )

    async def aclose(self) -> None:
        """Close the history store connection if one was opened."""
        if self._history_store is not None:
            await self._history_store.close()

    def clear(self) -> None:
        """Clear all cached instances."""
        self._corpus = None
        self._embedder = None
        self._generator = None
        self._history_store = None
        self._feed_fetcher = None


# Global service cache
_service_cache = ServiceCache()

def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_corpus():
    """
    Get the shared corpus.

    Returns:
        Corpus: Process-wide corpus instance
    """
    return get_service_cache().corpus


def get_history_store():
    """
    Get the shared session history store.

    Returns:
        RedisHistoryStore: Redis-backed history store
    """
    return get_service_cache().history_store


def get_ingestion_service() -> IngestionService:
    """
    Get ingestion service instance.

    Returns:
        IngestionService: Service bound to the shared corpus and embedder
    """
    return get_service_cache().ingestion_service()


def get_chat_service() -> ChatService:
    """
    Get chat service instance.

    Returns:
        ChatService: Service bound to the shared corpus, providers and history store
    """
    return get_service_cache().chat_service()

