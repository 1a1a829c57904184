"""Request/Response models for API endpoints."""

from typing import Optional

from pydantic import BaseModel, Field

from riskgate.services.classifier.models import ClassificationResult


class ClassifyRequest(BaseModel):
    """Request model for classify endpoint."""

    text: str = Field(..., description="Text to classify")
    preset: Optional[str] = Field(None, description="Preset name overriding the default config")
    session_id: Optional[str] = Field(None, description="Session to count rejections against")


class BatchClassifyRequest(BaseModel):
    """Request model for batch classify endpoint."""

    texts: list[str] = Field(..., description="Texts to classify independently")
    preset: Optional[str] = Field(None, description="Preset name overriding the default config")


class BatchClassifyResponse(BaseModel):
    """Response model for batch classify endpoint."""

    results: list[ClassificationResult] = Field(..., description="One result per input text, in order")
    rejected: int = Field(..., description="Number of rejected texts")


class HealthResponse(BaseModel):
    """Response model for health endpoint."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")


class SessionViolationsResponse(BaseModel):
    """Rejection counters for a session."""

    session_id: str
    total: int = 0
    by_signal: dict[str, int] = {}
    last_violation_at: Optional[float] = None
