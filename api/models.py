"""Pydantic models for API request/response validation.

Defines data structures for all API endpoints.
"""

from pydantic import BaseModel, Field

from core.config import MAX_PASSWORD_LENGTH


class PasswordCheckRequest(BaseModel):
    """Request model for password strength check.

    Empty passwords are accepted and scored like any other input.
    """
    password: str = Field(..., max_length=MAX_PASSWORD_LENGTH, description="Password to check")


class PasswordCheckResponse(BaseModel):
    """Response model for password check."""
    length_score: float = Field(..., ge=0, le=10)
    common_password_score: float = Field(..., ge=0, le=10)
    composition_score: float = Field(..., ge=0, le=10)
    total: float = Field(..., ge=0, le=30)
    strength: str
    feedback: list[str]
    match_reason: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    dictionary_entries: int
