"""
Pydantic models for request and response validation.
"""
from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from enum import Enum


class MatchSource(str, Enum):
    """Where a reply came from."""
    INTENT = "intent"
    FAQ = "faq"
    FALLBACK = "fallback"


class ChatMessageRequest(BaseModel):
    """Request model for the message endpoint."""
    message: Optional[str] = Field(default=None, description="User chat message")
    session_id: Optional[str] = Field(default=None, alias="sessionId", description="Client session identifier")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "message": "How do I register as a student?",
                "sessionId": "session_1731490000000_k2j9x8f1a"
            }
        }


class ClearHistoryRequest(BaseModel):
    """Request model for the clear-history endpoint."""
    session_id: Optional[str] = Field(default=None, alias="sessionId", description="Session whose history is dropped")

    class Config:
        populate_by_name = True


class MatchResult(BaseModel):
    """Outcome of matching one message against the corpus."""
    response: str = Field(..., description="Reply text")
    source: MatchSource = Field(..., description="Which resolver produced the reply")
    score: float = Field(default=0.0, ge=0.0, le=1.0, description="Best similarity score of the winning resolver")
    intent_tag: Optional[str] = Field(default=None, description="Tag of the matched intent, if any")


class ChatTurn(BaseModel):
    """Single conversation turn kept in session history."""
    role: str = Field(..., description="'user' or 'assistant'")
    content: str = Field(..., description="Message text")


class StatusData(BaseModel):
    """Chatbot availability details."""
    configured: bool
    provider: str
    available: bool


class HealthCheckResponse(BaseModel):
    """Response model for health check endpoint."""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Health check timestamp")


class ErrorResponse(BaseModel):
    """Response model for errors."""
    success: bool = Field(default=False)
    message: str = Field(..., description="Error message")
    error: Optional[str] = Field(default=None, description="Detailed error information")


class SuggestionsData(BaseModel):
    suggestions: List[str]
