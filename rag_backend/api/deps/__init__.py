"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceCache,
    get_chat_service,
    get_corpus,
    get_history_store,
    get_ingestion_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "ServiceCache",
    "get_chat_service",
    "get_corpus",
    "get_history_store",
    "get_ingestion_service",
    "get_service_cache",
    "get_settings_dependency",
]
