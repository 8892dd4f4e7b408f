"""
FastAPI router for sleep tracking endpoints.

Provides endpoints for sleep entries and sleep analytics.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from common.utils import success_response
from neurosphere.config import settings
from neurosphere.dependencies import require_auth, get_sleep_service
from neurosphere.pipelines import sleep as pipelines
from neurosphere.schemas.sleep import SleepEntryRequest
from neurosphere.services.sleep.sleep_service import SleepService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sleep", tags=["sleep"])


@router.post("", status_code=201)
async def create_sleep_entry(
    body: SleepEntryRequest,
    user: Annotated[dict, Depends(require_auth)],
    sleep_service: Annotated[SleepService, Depends(get_sleep_service)],
):
    """
    Log a night of sleep.

    Duration is computed from bed and wake times; a wake time earlier
    than the bed time is read as sleeping past midnight.
    """
    result = await pipelines.create_sleep_entry_pipeline(
        sleep_service=sleep_service,
        user_id=str(user["_id"]),
        data=body.model_dump()
    )

    return success_response(result)


@router.get("")
async def get_sleep_history(
    user: Annotated[dict, Depends(require_auth)],
    sleep_service: Annotated[SleepService, Depends(get_sleep_service)],
    limit: int = Query(settings.HISTORY_DEFAULT_LIMIT, ge=1, le=settings.HISTORY_MAX_LIMIT),
    offset: int = Query(0, ge=0),
):
    """
    Get sleep history with pagination, newest first.
    """
    result = await pipelines.get_sleep_history_pipeline(
        sleep_service=sleep_service,
        user_id=str(user["_id"]),
        limit=limit,
        offset=offset
    )

    return success_response(result)


@router.get("/analytics")
async def get_sleep_analytics(
    user: Annotated[dict, Depends(require_auth)],
    sleep_service: Annotated[SleepService, Depends(get_sleep_service)],
    timeframe: Optional[str] = Query(None, description="week, month, 3months or year"),
):
    """
    Get sleep metrics, insights, tips and chart data for a trailing window.
    """
    result = await pipelines.get_sleep_analytics_pipeline(
        sleep_service=sleep_service,
        user_id=str(user["_id"]),
        timeframe=timeframe or settings.DEFAULT_TIMEFRAME
    )

    return success_response(result)


@router.get("/{entry_id}")
async def get_sleep_entry(
    entry_id: str,
    user: Annotated[dict, Depends(require_auth)],
    sleep_service: Annotated[SleepService, Depends(get_sleep_service)],
):
    """
    Get one of your sleep entries.
    """
    result = await pipelines.get_sleep_entry_pipeline(
        sleep_service=sleep_service,
        user_id=str(user["_id"]),
        entry_id=entry_id
    )

    return success_response(result)


@router.put("/{entry_id}")
async def update_sleep_entry(
    entry_id: str,
    body: SleepEntryRequest,
    user: Annotated[dict, Depends(require_auth)],
    sleep_service: Annotated[SleepService, Depends(get_sleep_service)],
):
    """
    Edit one of your sleep entries.
    """
    result = await pipelines.update_sleep_entry_pipeline(
        sleep_service=sleep_service,
        user_id=str(user["_id"]),
        entry_id=entry_id,
        data=body.model_dump()
    )

    return success_response(result)


@router.delete("/{entry_id}")
async def delete_sleep_entry(
    entry_id: str,
    user: Annotated[dict, Depends(require_auth)],
    sleep_service: Annotated[SleepService, Depends(get_sleep_service)],
):
    """
    Delete one of your sleep entries.
    """
    result = await pipelines.delete_sleep_entry_pipeline(
        sleep_service=sleep_service,
        user_id=str(user["_id"]),
        entry_id=entry_id
    )

    return success_response(result, message="Sleep entry deleted")
