"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from rag_backend.configs.base import BaseSettings
from rag_backend.configs.feed import FeedSettings
from rag_backend.configs.gemini import GeminiSettings
from rag_backend.configs.history_store import RedisSettings
from rag_backend.configs.server import ServerSettings
from rag_backend.configs.vector_store import VectorStoreSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    server: ServerSettings = Field(default_factory=ServerSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    gemini: GeminiSettings = Field(default_factory=GeminiSettings)
    redis: RedisSettings = Field(default_factory=RedisSettings)
    feed: FeedSettings = Field(default_factory=FeedSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from rag_backend.configs import get_settings
        settings = get_settings()
    """
    return Settings()
