"""
Article feed configuration settings.

RSS source used to seed the corpus at startup.

Dependencies: pydantic, pydantic_settings
System role: Startup ingestion configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FeedSettings(BaseSettings):
    """RSS feed configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FEED_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(
        default="https://rss.nytimes.com/services/xml/rss/nyt/World.xml",
        description="RSS 2.0 feed URL",
    )
    limit: int = Field(default=50, description="Maximum articles ingested at startup", ge=1)
    timeout: float = Field(default=10.0, description="Feed request timeout in seconds")
    auto_ingest: bool = Field(default=True, description="Ingest the feed on startup")
