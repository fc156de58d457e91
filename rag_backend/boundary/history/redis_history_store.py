"""
Redis-backed session history store.

Each session is a Redis list of JSON-encoded {"user", "bot"} exchanges,
appended with RPUSH and read back in order with LRANGE.

Dependencies: redis (asyncio client), rag_backend.core.exceptions
System role: Per-session conversational history persistence
"""

import json
import logging
from typing import Any

from redis import asyncio as aioredis
from redis.exceptions import RedisError

from rag_backend.core.exceptions import HistoryStoreError

logger = logging.getLogger(__name__)

HistoryMessage = dict[str, Any]


class RedisHistoryStore:
    """Append/read/clear chat history keyed by session ID."""

    def __init__(self, client: aioredis.Redis) -> None:
        """
        Initialize store with a Redis client.

        Args:
            client: redis.asyncio client created with decode_responses=True
        """
        self._client = client

    @classmethod
    def from_url(cls, url: str, socket_timeout: float | None = None) -> "RedisHistoryStore":
        """Create a store with its own connection pool."""
        client = aioredis.from_url(url, decode_responses=True, socket_timeout=socket_timeout)
        return cls(client)

    async def append(self, session_id: str, message: HistoryMessage) -> int:
        """
        Append one exchange to a session.

        Args:
            session_id: Session key
            message: JSON-serializable exchange, e.g. {"user": ..., "bot": ...}

        Returns:
            int: Session length after the append

        Raises:
            HistoryStoreError: If Redis is unavailable
        """
        try:
            return int(await self._client.rpush(session_id, json.dumps(message)))
        except RedisError as e:
            logger.error(f"{__name__}:append - {type(e).__name__}: {e}")
            raise HistoryStoreError("Failed to save message", session_id=session_id) from e

    async def list_messages(self, session_id: str) -> list[HistoryMessage]:
        """
        Return every exchange of a session, oldest first.

        Entries that are not valid JSON objects are skipped.

        Raises:
            HistoryStoreError: If Redis is unavailable
        """
        try:
            raw_messages = await self._client.lrange(session_id, 0, -1)
        except RedisError as e:
            logger.error(f"{__name__}:list_messages - {type(e).__name__}: {e}")
            raise HistoryStoreError("Failed to fetch history", session_id=session_id) from e

        messages: list[HistoryMessage] = []
        for raw in raw_messages:
            try:
                decoded = json.loads(raw)
            except (TypeError, ValueError):
                logger.warning(f"{__name__}:list_messages - Skipping undecodable entry in {session_id}")
                continue
            if isinstance(decoded, dict):
                messages.append(decoded)
        return messages

    async def clear(self, session_id: str) -> bool:
        """
        Delete a session's history.

        Returns:
            bool: True if the session existed

        Raises:
            HistoryStoreError: If Redis is unavailable
        """
        try:
            return bool(await self._client.delete(session_id))
        except RedisError as e:
            logger.error(f"{__name__}:clear - {type(e).__name__}: {e}")
            raise HistoryStoreError("Failed to reset session", session_id=session_id) from e

    async def ping(self) -> bool:
        """Return True if Redis answers, False otherwise."""
        try:
            return bool(await self._client.ping())
        except RedisError as e:
            logger.warning(f"{__name__}:ping - Redis unavailable: {e}")
            return False

    async def close(self) -> None:
        await self._client.aclose()
