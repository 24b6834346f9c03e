"""
Shared response envelopes and static-content models.
Every error from this API is an ErrorResponse.
"""

from typing import List, Optional

from pydantic import BaseModel

from mindmap_ai.schemas.mindmap import CamelModel


class ErrorResponse(BaseModel):
    """Standard error envelope: {error, details?}."""
    error: str
    details: Optional[str] = None


class HealthResponse(CamelModel):
    status: str
    timestamp: str
    ai_status: str
    gemini_status: str  # same value as ai_status, the field name older clients read
    provider: str


class FAQ(BaseModel):
    id: int
    question: str
    answer: str


class UseCase(BaseModel):
    id: int
    title: str
    description: str
    icon: str
    benefits: List[str]
