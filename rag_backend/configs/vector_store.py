"""
Vector store configuration settings.

Controls the in-memory FAISS index and retrieval depth.

Dependencies: pydantic, pydantic_settings
System role: Vector index configuration for RAG retrieval
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """In-memory vector index configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="VECTOR_STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    batch_size: int = Field(
        default=64,
        description="Vectors marshalled per FAISS add() call",
    )
    top_k: int = Field(default=3, description="Number of documents retrieved as chat context")

    @field_validator("batch_size", "top_k")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"must be >= 1, got {v}")
        return v
