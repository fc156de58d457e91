"""
Session history models and schemas.

Dependencies: pydantic
System role: History API contracts
"""

from pydantic import BaseModel, Field


class HistoryEntry(BaseModel):
    """One user/bot exchange."""

    user: str = Field(description="User message")
    bot: str = Field(description="Assistant answer")


class HistoryResponse(BaseModel):
    """Response schema for session history."""

    session_id: str = Field(serialization_alias="sessionId", description="Conversation session key")
    history: list[HistoryEntry]


class ResetResponse(BaseModel):
    """Response schema for session reset."""

    message: str
