"""
NeuroSphere Schemas.

Pydantic models for request validation.
"""

from neurosphere.schemas.mood import MoodEntryRequest
from neurosphere.schemas.sleep import SleepEntryRequest
from neurosphere.schemas.therapist import ChatRequest, FeedbackRequest
from neurosphere.schemas.user import ProfileRequest

__all__ = [
    "MoodEntryRequest",
    "SleepEntryRequest",
    "ChatRequest",
    "FeedbackRequest",
    "ProfileRequest",
]
