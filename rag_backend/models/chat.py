"""
Chat domain models and schemas.

Request/response schemas for chat operations.

Dependencies: pydantic
System role: Chat API contracts
"""

from pydantic import AliasChoices, BaseModel, Field


class ChatRequest(BaseModel):
    """Request schema for chat messages."""

    session_id: str = Field(
        default="",
        validation_alias=AliasChoices("session_id", "sessionId"),
        description="Conversation session key",
    )
    query: str = Field(default="", description="User question")


class Source(BaseModel):
    """Document used as context for an answer."""

    text: str
    title: str | None = None
    source_link: str | None = None
    distance: float = Field(description="Squared L2 distance to the query embedding")


class ChatResponse(BaseModel):
    """Response schema for chat messages."""

    session_id: str = Field(serialization_alias="sessionId", description="Conversation session key")
    query: str
    response: str
    sources: list[Source] = Field(default_factory=list)
