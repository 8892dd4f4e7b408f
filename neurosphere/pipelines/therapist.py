"""
Therapist proxy pipeline functions.

Stateless orchestration logic for the AI therapist chat.
"""

import logging
from typing import Optional, Dict, Any

from common.utils.exceptions import NotFoundException
from neurosphere.services.therapist.therapist_client import TherapistClient
from neurosphere.services.user.user_context_service import UserContextService

logger = logging.getLogger(__name__)


async def chat_pipeline(
    therapist_client: TherapistClient,
    user_context_service: UserContextService,
    user_id: str,
    message: str,
    gender: Optional[str] = None,
    age: Optional[int] = None
) -> Dict[str, Any]:
    """
    Forward a chat message to the therapist service.

    Args:
        therapist_client: Proxy to the therapist service
        user_context_service: For age/gender the request leaves out
        user_id: Current user's ID
        message: The user's message
        gender: Gender override from the request
        age: Age override from the request

    Returns:
        dict with response and audio_base64
    """
    if gender is None or age is None:
        try:
            context = await user_context_service.get_context(user_id)
        except NotFoundException:
            # Onboarding not finished; chat without context
            logger.info(f"No profile for user {user_id}, chatting without context")
            context = {"age": None, "gender": None}

        gender = gender if gender is not None else context["gender"]
        age = age if age is not None else context["age"]

    return await therapist_client.chat(user_id, message, gender=gender, age=age)


async def feedback_pipeline(
    therapist_client: TherapistClient,
    user_id: str,
    feedback: str
) -> Dict[str, Any]:
    """Submit session feedback to the therapist service."""
    return await therapist_client.send_feedback(user_id, feedback.strip())
