"""
FastAPI router for the AI therapist proxy.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import success_response
from neurosphere.dependencies import require_auth, get_therapist_client, get_user_context_service
from neurosphere.pipelines import therapist as pipelines
from neurosphere.schemas.therapist import ChatRequest, FeedbackRequest
from neurosphere.services.therapist.therapist_client import TherapistClient
from neurosphere.services.user.user_context_service import UserContextService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/therapist", tags=["therapist"])


@router.post("/chat")
async def chat(
    body: ChatRequest,
    user: Annotated[dict, Depends(require_auth)],
    therapist_client: Annotated[TherapistClient, Depends(get_therapist_client)],
    user_context_service: Annotated[UserContextService, Depends(get_user_context_service)],
):
    """
    Send a message to the AI therapist.

    Age and gender default to the values saved during onboarding.
    """
    result = await pipelines.chat_pipeline(
        therapist_client=therapist_client,
        user_context_service=user_context_service,
        user_id=str(user["_id"]),
        message=body.message,
        gender=body.gender,
        age=body.age
    )

    return success_response(result)


@router.post("/feedback")
async def submit_feedback(
    body: FeedbackRequest,
    user: Annotated[dict, Depends(require_auth)],
    therapist_client: Annotated[TherapistClient, Depends(get_therapist_client)],
):
    """
    Submit feedback about a therapist session.
    """
    result = await pipelines.feedback_pipeline(
        therapist_client=therapist_client,
        user_id=str(user["_id"]),
        feedback=body.feedback
    )

    return success_response(result)
