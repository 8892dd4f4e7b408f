"""
FastAPI router for user context endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import success_response
from neurosphere.dependencies import require_auth, get_user_context_service
from neurosphere.pipelines import user as pipelines
from neurosphere.schemas.user import ProfileRequest
from neurosphere.services.user.user_context_service import UserContextService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user", tags=["user"])


@router.get("/context")
async def get_user_context(
    user: Annotated[dict, Depends(require_auth)],
    user_context_service: Annotated[UserContextService, Depends(get_user_context_service)],
):
    """
    Get the age and gender stored for the current user.
    """
    result = await pipelines.get_user_context_pipeline(
        user_context_service=user_context_service,
        user_id=str(user["_id"])
    )

    return success_response(result)


@router.put("/profile")
async def save_profile(
    body: ProfileRequest,
    user: Annotated[dict, Depends(require_auth)],
    user_context_service: Annotated[UserContextService, Depends(get_user_context_service)],
):
    """
    Save the onboarding profile.
    """
    result = await pipelines.save_profile_pipeline(
        user_context_service=user_context_service,
        user_id=str(user["_id"]),
        name=body.name,
        age=body.age,
        gender=body.gender,
        email=user.get("email"),
        occupation=body.occupation,
        goals=body.goals
    )

    return success_response(result)
