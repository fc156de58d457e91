"""
Gemini provider configuration settings.

Embedding and chat model settings for Google Generative AI.

Dependencies: pydantic, pydantic_settings
System role: Embedding and generation provider configuration
"""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class GeminiSettings(BaseSettings):
    """Google Gemini embedding and generation configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: SecretStr | None = Field(
        default=None,
        description="Google AI Studio API key (never logged)",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Google embedding model ID",
    )
    embedding_dimension: int | None = Field(
        default=None,
        description="Requested output dimensionality (model default when unset)",
    )
    chat_model: str = Field(default="gemini-2.0-flash", description="Gemini model for answers")
    temperature: float = Field(default=0.2, description="Sampling temperature", ge=0.0, le=2.0)
    max_retries: int = Field(default=3, description="Attempts per embedding call", ge=1, le=10)
    timeout: float = Field(default=30.0, description="Provider request timeout in seconds")

    @property
    def has_api_key(self) -> bool:
        return self.api_key is not None and bool(self.api_key.get_secret_value())
