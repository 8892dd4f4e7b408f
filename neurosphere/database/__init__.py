"""
NeuroSphere-specific database utilities.
"""

from neurosphere.database.collections import (
    MOOD_COLLECTION,
    SLEEP_COLLECTION,
    USERS_COLLECTION,
    ENTRY_INDEXES,
)

__all__ = [
    "MOOD_COLLECTION",
    "SLEEP_COLLECTION",
    "USERS_COLLECTION",
    "ENTRY_INDEXES",
]
