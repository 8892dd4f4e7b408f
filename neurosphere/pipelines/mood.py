"""
Mood tracking pipeline functions.

Stateless orchestration logic for mood entries and mood analytics.
"""

import logging
from datetime import date
from typing import Optional, Dict, Any

from neurosphere.services.analytics.charts import mood_calendar, mood_distribution, mood_graph
from neurosphere.services.analytics.insights import generate_mood_insights
from neurosphere.services.analytics.metrics import compute_mood_metrics
from neurosphere.services.analytics.timeframe import DEFAULT_TIMEFRAME, TIMEFRAME_DAYS, select_timeframe
from neurosphere.services.mood.mood_service import MoodService

logger = logging.getLogger(__name__)


async def create_mood_entry_pipeline(
    mood_service: MoodService,
    user_id: str,
    data: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Create a mood entry.

    Args:
        mood_service: For data persistence
        user_id: Current user's ID
        data: Entry fields from request

    Returns:
        Formatted entry
    """
    entry = await mood_service.create_entry(user_id, data)
    return format_mood_entry(entry)


async def get_mood_entry_pipeline(
    mood_service: MoodService,
    user_id: str,
    entry_id: str
) -> Dict[str, Any]:
    """Get one of the current user's mood entries."""
    entry = await mood_service.get_entry(user_id, entry_id)
    return format_mood_entry(entry)


async def update_mood_entry_pipeline(
    mood_service: MoodService,
    user_id: str,
    entry_id: str,
    data: Dict[str, Any]
) -> Dict[str, Any]:
    """Edit one of the current user's mood entries."""
    entry = await mood_service.update_entry(user_id, entry_id, data)
    return format_mood_entry(entry)


async def delete_mood_entry_pipeline(
    mood_service: MoodService,
    user_id: str,
    entry_id: str
) -> Dict[str, Any]:
    """Delete one of the current user's mood entries."""
    await mood_service.delete_entry(user_id, entry_id)
    return {"id": entry_id, "deleted": True}


async def get_mood_history_pipeline(
    mood_service: MoodService,
    user_id: str,
    limit: int = 30,
    offset: int = 0
) -> Dict[str, Any]:
    """
    Get mood history with pagination.

    Args:
        mood_service: For data retrieval
        user_id: Current user's ID
        limit: Max records to return
        offset: Records to skip

    Returns:
        dict with entries list and pagination metadata
    """
    entries = await mood_service.list_entries(user_id, limit=limit, offset=offset)
    total = await mood_service.count_entries(user_id)

    return {
        "entries": [format_mood_entry(e) for e in entries],
        "total": total,
        "limit": limit,
        "offset": offset,
        "hasMore": (offset + len(entries)) < total
    }


async def get_mood_analytics_pipeline(
    mood_service: MoodService,
    user_id: str,
    timeframe: Optional[str] = None
) -> Dict[str, Any]:
    """
    Compute mood analytics for a trailing window.

    Args:
        mood_service: For the user's full record set
        user_id: Current user's ID
        timeframe: week, month, 3months or year (unknown values mean week)

    Returns:
        dict with timeframe, metrics, insights, graph and distribution
    """
    if timeframe not in TIMEFRAME_DAYS:
        timeframe = DEFAULT_TIMEFRAME

    entries = await mood_service.get_all_entries(user_id)
    window = select_timeframe(entries, timeframe)

    metrics = compute_mood_metrics(window)
    logger.debug(f"Mood analytics for user {user_id}: {len(window)}/{len(entries)} entries in {timeframe}")

    return {
        "timeframe": timeframe,
        "metrics": metrics.to_dict(),
        "insights": generate_mood_insights(metrics, len(window)),
        "graph": mood_graph(window),
        "distribution": mood_distribution(window),
    }


async def get_mood_calendar_pipeline(
    mood_service: MoodService,
    user_id: str,
    today: Optional[date] = None
) -> Dict[str, Any]:
    """
    Build the current month's mood calendar from all of the user's entries.

    Returns:
        dict with the list of day cells
    """
    entries = await mood_service.get_all_entries(user_id)
    return {"days": mood_calendar(entries, today=today)}


def format_mood_entry(entry: Dict[str, Any]) -> Dict[str, Any]:
    """Format mood document for API response."""
    return {
        "id": str(entry["_id"]),
        "mood": entry["mood"],
        "moodLabel": entry.get("moodLabel"),
        "energyLevel": entry.get("energyLevel"),
        "activities": entry.get("activities", []),
        "note": entry.get("note"),
        "date": entry.get("date"),
        "time": entry.get("time"),
        "timestamp": entry.get("timestamp"),
        "createdAt": entry.get("createdAt"),
    }
