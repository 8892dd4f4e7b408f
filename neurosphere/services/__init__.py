"""
NeuroSphere Services.

All service classes organized by feature.
"""

# Entry services
from neurosphere.services.entries.entry_validator import EntryValidator
from neurosphere.services.mood.mood_service import MoodService
from neurosphere.services.sleep.sleep_service import SleepService

# Proxy and profile services
from neurosphere.services.therapist.therapist_client import TherapistClient
from neurosphere.services.user.user_context_service import UserContextService

__all__ = [
    "EntryValidator",
    "MoodService",
    "SleepService",
    "TherapistClient",
    "UserContextService",
]
