"""
User context pipeline functions.
"""

import logging
from typing import Optional, Dict, Any, List

from neurosphere.services.user.user_context_service import UserContextService

logger = logging.getLogger(__name__)


async def get_user_context_pipeline(
    user_context_service: UserContextService,
    user_id: str
) -> Dict[str, Any]:
    """Get the age and gender stored for the current user."""
    return await user_context_service.get_context(user_id)


async def save_profile_pipeline(
    user_context_service: UserContextService,
    user_id: str,
    name: str,
    age: int,
    gender: Optional[str] = None,
    email: Optional[str] = None,
    occupation: Optional[str] = None,
    goals: Optional[List[str]] = None
) -> Dict[str, Any]:
    """
    Save the onboarding profile.

    Returns:
        Formatted profile
    """
    profile = await user_context_service.save_profile(
        user_id,
        name=name,
        age=age,
        gender=gender,
        email=email,
        occupation=occupation,
        goals=goals
    )
    return _format_profile(profile)


def _format_profile(profile: Dict[str, Any]) -> Dict[str, Any]:
    """Format user document for API response."""
    return {
        "id": str(profile["_id"]),
        "name": profile.get("name"),
        "email": profile.get("email"),
        "age": profile.get("age"),
        "gender": profile.get("gender"),
        "occupation": profile.get("occupation"),
        "goals": profile.get("goals", []),
    }
