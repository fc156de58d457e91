"""
HTTP server configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Uvicorn and CORS configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """Server bind address and CORS policy."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=5000, description="Bind port")
    cors_origin: str | None = Field(
        default=None,
        description="Allowed CORS origin (all origins when unset)",
    )
