"""
NeuroSphere API Routers.

All routers are imported here for easy access.
"""

from neurosphere.routers.mood import router as mood_router
from neurosphere.routers.sleep import router as sleep_router
from neurosphere.routers.therapist import router as therapist_router
from neurosphere.routers.user import router as user_router

__all__ = [
    "mood_router",
    "sleep_router",
    "therapist_router",
    "user_router",
]
