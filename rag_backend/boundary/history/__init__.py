"""
Session history storage.

Dependencies: redis
System role: Chat history persistence collaborator
"""

from rag_backend.boundary.history.redis_history_store import HistoryMessage, RedisHistoryStore

__all__ = ["HistoryMessage", "RedisHistoryStore"]
