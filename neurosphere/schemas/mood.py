"""
Pydantic models for mood tracking request validation.
"""

from typing import Optional, List
from pydantic import BaseModel, Field


# =============================================================================
# Request Schemas
# =============================================================================

class MoodEntryRequest(BaseModel):
    """POST /api/mood and PUT /api/mood/{id}"""
    mood: int = Field(..., ge=1, le=5, description="1 (Bad) to 5 (Excellent)")
    energyLevel: Optional[int] = Field(None, ge=1, le=5, description="1-5 scale")
    activities: List[str] = Field(default_factory=list, description="Activity tag ids")
    note: Optional[str] = Field(None, max_length=1000)
    date: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    time: str = Field(..., pattern=r"^\d{2}:\d{2}$", description="HH:MM, 24-hour")
