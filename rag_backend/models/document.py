"""
Document domain models and schemas.

Request/response schemas for corpus ingestion.

Dependencies: pydantic
System role: Ingestion API contracts
"""

from pydantic import AliasChoices, BaseModel, Field


class IngestDocument(BaseModel):
    """Single document with optional title and source link."""

    text: str = Field(description="Document body")
    title: str | None = Field(default=None, description="Optional title, prepended when embedding")
    source_link: str | None = Field(
        default=None,
        validation_alias=AliasChoices("source_link", "sourceLink", "link"),
        description="Optional URL of the source article",
    )


class IngestRequest(BaseModel):
    """Request schema for ingesting documents."""

    docs: list[str | IngestDocument] = Field(
        default_factory=list,
        description="Plain texts or documents to embed and index",
    )


class IngestResponse(BaseModel):
    """Response schema for ingestion."""

    message: str
    ingested: int = Field(description="Documents ingested by this request")
    total_documents: int = Field(description="Corpus size after ingestion")


class CorpusStats(BaseModel):
    """Snapshot of corpus size."""

    documents: int
    vectors: int
    dimension: int | None = None
