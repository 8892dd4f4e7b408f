"""Mood services."""

from neurosphere.services.mood.mood_service import MoodService

__all__ = ["MoodService"]
