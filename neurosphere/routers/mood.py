"""
FastAPI router for mood tracking endpoints.

Provides endpoints for mood entries, analytics and the monthly calendar.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from common.utils import success_response
from neurosphere.config import settings
from neurosphere.dependencies import require_auth, get_mood_service
from neurosphere.pipelines import mood as pipelines
from neurosphere.schemas.mood import MoodEntryRequest
from neurosphere.services.mood.mood_service import MoodService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mood", tags=["mood"])


@router.post("", status_code=201)
async def create_mood_entry(
    body: MoodEntryRequest,
    user: Annotated[dict, Depends(require_auth)],
    mood_service: Annotated[MoodService, Depends(get_mood_service)],
):
    """
    Log a mood entry.

    The entry is timestamped with the date and time the user picked.
    """
    result = await pipelines.create_mood_entry_pipeline(
        mood_service=mood_service,
        user_id=str(user["_id"]),
        data=body.model_dump()
    )

    return success_response(result)


@router.get("")
async def get_mood_history(
    user: Annotated[dict, Depends(require_auth)],
    mood_service: Annotated[MoodService, Depends(get_mood_service)],
    limit: int = Query(settings.HISTORY_DEFAULT_LIMIT, ge=1, le=settings.HISTORY_MAX_LIMIT),
    offset: int = Query(0, ge=0),
):
    """
    Get mood history with pagination, newest first.
    """
    result = await pipelines.get_mood_history_pipeline(
        mood_service=mood_service,
        user_id=str(user["_id"]),
        limit=limit,
        offset=offset
    )

    return success_response(result)


@router.get("/analytics")
async def get_mood_analytics(
    user: Annotated[dict, Depends(require_auth)],
    mood_service: Annotated[MoodService, Depends(get_mood_service)],
    timeframe: Optional[str] = Query(None, description="week, month, 3months or year"),
):
    """
    Get mood metrics, insights and chart data for a trailing window.
    """
    result = await pipelines.get_mood_analytics_pipeline(
        mood_service=mood_service,
        user_id=str(user["_id"]),
        timeframe=timeframe or settings.DEFAULT_TIMEFRAME
    )

    return success_response(result)


@router.get("/calendar")
async def get_mood_calendar(
    user: Annotated[dict, Depends(require_auth)],
    mood_service: Annotated[MoodService, Depends(get_mood_service)],
):
    """
    Get the current month's mood calendar.
    """
    result = await pipelines.get_mood_calendar_pipeline(
        mood_service=mood_service,
        user_id=str(user["_id"])
    )

    return success_response(result)


@router.get("/{entry_id}")
async def get_mood_entry(
    entry_id: str,
    user: Annotated[dict, Depends(require_auth)],
    mood_service: Annotated[MoodService, Depends(get_mood_service)],
):
    """
    Get one of your mood entries.
    """
    result = await pipelines.get_mood_entry_pipeline(
        mood_service=mood_service,
        user_id=str(user["_id"]),
        entry_id=entry_id
    )

    return success_response(result)


@router.put("/{entry_id}")
async def update_mood_entry(
    entry_id: str,
    body: MoodEntryRequest,
    user: Annotated[dict, Depends(require_auth)],
    mood_service: Annotated[MoodService, Depends(get_mood_service)],
):
    """
    Edit one of your mood entries.
    """
    result = await pipelines.update_mood_entry_pipeline(
        mood_service=mood_service,
        user_id=str(user["_id"]),
        entry_id=entry_id,
        data=body.model_dump()
    )

    return success_response(result)


@router.delete("/{entry_id}")
async def delete_mood_entry(
    entry_id: str,
    user: Annotated[dict, Depends(require_auth)],
    mood_service: Annotated[MoodService, Depends(get_mood_service)],
):
    """
    Delete one of your mood entries.
    """
    result = await pipelines.delete_mood_entry_pipeline(
        mood_service=mood_service,
        user_id=str(user["_id"]),
        entry_id=entry_id
    )

    return success_response(result, message="Mood entry deleted")
