"""
Pydantic models for the therapist proxy.
"""

from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# Request Schemas
# =============================================================================

class ChatRequest(BaseModel):
    """POST /api/therapist/chat"""
    message: str = Field(..., min_length=1, max_length=4000)
    gender: Optional[str] = None
    age: Optional[int] = Field(None, gt=0)


class FeedbackRequest(BaseModel):
    """POST /api/therapist/feedback"""
    feedback: str = Field(..., min_length=1, max_length=2000)
