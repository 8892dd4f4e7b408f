"""
Sleep tracking pipeline functions.

Stateless orchestration logic for sleep entries and sleep analytics.
"""

import logging
from typing import Optional, Dict, Any

from neurosphere.services.analytics.charts import sleep_graph
from neurosphere.services.analytics.insights import generate_sleep_insights, select_sleep_tips
from neurosphere.services.analytics.metrics import compute_sleep_metrics
from neurosphere.services.analytics.timeframe import DEFAULT_TIMEFRAME, TIMEFRAME_DAYS, select_timeframe
from neurosphere.services.sleep.sleep_service import SleepService

logger = logging.getLogger(__name__)


async def create_sleep_entry_pipeline(
    sleep_service: SleepService,
    user_id: str,
    data: Dict[str, Any]
) -> Dict[str, Any]:
    """
    Create a sleep entry.

    Args:
        sleep_service: For data persistence
        user_id: Current user's ID
        data: Entry fields from request

    Returns:
        Formatted entry including the computed duration
    """
    entry = await sleep_service.create_entry(user_id, data)
    return format_sleep_entry(entry)


async def get_sleep_entry_pipeline(
    sleep_service: SleepService,
    user_id: str,
    entry_id: str
) -> Dict[str, Any]:
    """Get one of the current user's sleep entries."""
    entry = await sleep_service.get_entry(user_id, entry_id)
    return format_sleep_entry(entry)


async def update_sleep_entry_pipeline(
    sleep_service: SleepService,
    user_id: str,
    entry_id: str,
    data: Dict[str, Any]
) -> Dict[str, Any]:
    """Edit one of the current user's sleep entries."""
    entry = await sleep_service.update_entry(user_id, entry_id, data)
    return format_sleep_entry(entry)


async def delete_sleep_entry_pipeline(
    sleep_service: SleepService,
    user_id: str,
    entry_id: str
) -> Dict[str, Any]:
    """Delete one of the current user's sleep entries."""
    await sleep_service.delete_entry(user_id, entry_id)
    return {"id": entry_id, "deleted": True}


async def get_sleep_history_pipeline(
    sleep_service: SleepService,
    user_id: str,
    limit: int = 30,
    offset: int = 0
) -> Dict[str, Any]:
    """Get sleep history with pagination."""
    entries = await sleep_service.list_entries(user_id, limit=limit, offset=offset)
    total = await sleep_service.count_entries(user_id)

    return {
        "entries": [format_sleep_entry(e) for e in entries],
        "total": total,
        "limit": limit,
        "offset": offset,
        "hasMore": (offset + len(entries)) < total
    }


async def get_sleep_analytics_pipeline(
    sleep_service: SleepService,
    user_id: str,
    timeframe: Optional[str] = None
) -> Dict[str, Any]:
    """
    Compute sleep analytics for a trailing window.

    Args:
        sleep_service: For the user's full record set
        user_id: Current user's ID
        timeframe: week, month, 3months or year (unknown values mean week)

    Returns:
        dict with timeframe, metrics, insights, tips and graph
    """
    if timeframe not in TIMEFRAME_DAYS:
        timeframe = DEFAULT_TIMEFRAME

    entries = await sleep_service.get_all_entries(user_id)
    window = select_timeframe(entries, timeframe)

    metrics = compute_sleep_metrics(window)
    logger.debug(f"Sleep analytics for user {user_id}: {len(window)}/{len(entries)} entries in {timeframe}")

    metrics_data = metrics.to_dict()
    for key in ("bestQualityDay", "worstQualityDay"):
        if metrics_data[key] is not None:
            metrics_data[key] = format_sleep_entry(metrics_data[key])

    return {
        "timeframe": timeframe,
        "metrics": metrics_data,
        "insights": generate_sleep_insights(metrics, len(window)),
        "tips": select_sleep_tips(metrics, len(window)),
        "graph": sleep_graph(window),
    }


def format_sleep_entry(entry: Dict[str, Any]) -> Dict[str, Any]:
    """Format sleep document for API response."""
    sleep_date = entry.get("sleepDate")
    return {
        "id": str(entry["_id"]),
        "sleepDate": sleep_date.strftime("%Y-%m-%d") if sleep_date else None,
        "bedTime": entry.get("bedTime"),
        "wakeTime": entry.get("wakeTime"),
        "sleepDuration": entry.get("sleepDuration"),
        "sleepQuality": entry.get("sleepQuality"),
        "mood": entry.get("mood"),
        "activities": entry.get("activities", []),
        "notes": entry.get("notes"),
        "createdAt": entry.get("createdAt"),
    }
