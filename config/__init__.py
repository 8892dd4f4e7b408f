"""
Configuration module - Fixed tracking vocabularies and content.
"""

from config.tracking_options import (
    MOOD_OPTIONS,
    MOOD_ACTIVITY_TAGS,
    SLEEP_QUALITY_OPTIONS,
    WAKE_MOOD_OPTIONS,
    SLEEP_ACTIVITY_OPTIONS,
)
from config.sleep_tips import SLEEP_TIPS
from config.profile_options import GENDER_OPTIONS, GOAL_OPTIONS

__all__ = [
    "MOOD_OPTIONS",
    "MOOD_ACTIVITY_TAGS",
    "SLEEP_QUALITY_OPTIONS",
    "WAKE_MOOD_OPTIONS",
    "SLEEP_ACTIVITY_OPTIONS",
    "SLEEP_TIPS",
    "GENDER_OPTIONS",
    "GOAL_OPTIONS",
]
