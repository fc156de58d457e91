"""
Shared settings base.

Every settings group reads the process environment and an optional .env
file. Unknown variables are ignored so a single .env can feed all groups.

Dependencies: pydantic_settings
System role: Common base for the settings groups
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Settings read from .env and the environment, case-insensitively."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    debug: bool = Field(
        default=False,
        description="Run FastAPI in debug mode (tracebacks in 500 responses)",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level handed to configure_logging at startup",
    )
