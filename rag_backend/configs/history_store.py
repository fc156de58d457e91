"""
Session history store configuration settings.

Redis connection for per-session chat history.

Dependencies: pydantic, pydantic_settings
System role: Chat history storage configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RedisSettings(BaseSettings):
    """Redis configuration for session history."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="REDIS_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(default="redis://localhost:6379", description="Redis connection URL")
    socket_timeout: float = Field(default=5.0, description="Socket timeout in seconds")
