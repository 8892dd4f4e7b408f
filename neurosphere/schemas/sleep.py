"""
Pydantic models for sleep tracking request validation.
"""

from typing import Optional, List
from pydantic import BaseModel, Field


# =============================================================================
# Request Schemas
# =============================================================================

class SleepEntryRequest(BaseModel):
    """POST /api/sleep and PUT /api/sleep/{id}"""
    sleepDate: str = Field(..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="YYYY-MM-DD")
    bedTime: str = Field(..., pattern=r"^\d{2}:\d{2}$", description="HH:MM, 24-hour")
    wakeTime: str = Field(..., pattern=r"^\d{2}:\d{2}$", description="HH:MM, 24-hour")
    sleepQuality: int = Field(..., ge=1, le=5, description="1 (Poor) to 5 (Excellent)")
    mood: str = Field(..., description="Wake mood: refreshed, energized, tired, groggy, neutral")
    activities: List[str] = Field(default_factory=list, description="Pre-sleep activity ids")
    notes: Optional[str] = Field(None, max_length=1000)
