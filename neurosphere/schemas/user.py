"""
Pydantic models for user profile requests.
"""

from typing import Optional, List
from pydantic import BaseModel, Field


# =============================================================================
# Request Schemas
# =============================================================================

class ProfileRequest(BaseModel):
    """PUT /api/user/profile"""
    name: str = Field(..., min_length=1, max_length=100)
    age: int = Field(..., gt=0)
    gender: Optional[str] = None
    occupation: Optional[str] = Field(None, max_length=100)
    goals: List[str] = Field(default_factory=list)
