"""
User context service.

Reads and writes the onboarding profile whose age and gender give the
therapist service context about the user.
"""

import logging
from datetime import datetime, timezone
from typing import Optional, Dict, Any, List

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.utils.exceptions import NotFoundException, ValidationException
from config import GENDER_OPTIONS, GOAL_OPTIONS
from neurosphere.database.collections import USERS_COLLECTION

logger = logging.getLogger(__name__)


class UserContextService:
    """
    Manages the user profile documents, keyed by identity provider uid.
    """

    MAX_NAME_LENGTH = 100
    MAX_OCCUPATION_LENGTH = 100

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize UserContextService.

        Args:
            db: MongoDB database connection
        """
        self._db = db
        self._users_collection = db[USERS_COLLECTION]

    async def get_context(self, user_id: str) -> Dict[str, Any]:
        """
        Get the age and gender of a user.

        Args:
            user_id: Identity provider user ID

        Returns:
            dict with age and gender (None when not set)

        Raises:
            NotFoundException: No profile for this user
        """
        user = await self._users_collection.find_one(
            {"_id": user_id},
            {"age": 1, "gender": 1}
        )

        if not user:
            raise NotFoundException(
                message="User not found",
                code="USER_NOT_FOUND"
            )

        return {
            "age": user.get("age") or None,
            "gender": user.get("gender") or None,
        }

    async def save_profile(
        self,
        user_id: str,
        name: str,
        age: int,
        gender: Optional[str] = None,
        email: Optional[str] = None,
        occupation: Optional[str] = None,
        goals: Optional[List[str]] = None
    ) -> Dict[str, Any]:
        """
        Create or replace the onboarding profile of a user.

        Args:
            user_id: Identity provider user ID
            name: Display name
            age: Age in years (positive)
            gender: One of GENDER_OPTIONS
            email: Account email, copied from the token
            occupation: Free text
            goals: Wellbeing goal ids

        Returns:
            Saved profile document

        Raises:
            ValidationException: Invalid name, age, gender or goals
        """
        name = (name or "").strip()
        if not name:
            raise ValidationException(message="Name is required", code="VALIDATION_ERROR")
        if len(name) > self.MAX_NAME_LENGTH:
            raise ValidationException(
                message=f"Name cannot exceed {self.MAX_NAME_LENGTH} characters",
                code="VALIDATION_ERROR"
            )

        if isinstance(age, bool) or not isinstance(age, int) or age <= 0:
            raise ValidationException(message="Please enter a valid age", code="VALIDATION_ERROR")

        if gender is not None and gender not in GENDER_OPTIONS:
            raise ValidationException(
                message=f"Gender must be one of: {', '.join(GENDER_OPTIONS)}",
                code="VALIDATION_ERROR"
            )

        unknown_goals = [g for g in goals or [] if g not in GOAL_OPTIONS]
        if unknown_goals:
            raise ValidationException(
                message=f"Unknown goals: {', '.join(unknown_goals)}",
                code="VALIDATION_ERROR"
            )

        occupation = occupation.strip() if occupation else None
        if occupation and len(occupation) > self.MAX_OCCUPATION_LENGTH:
            raise ValidationException(
                message=f"Occupation cannot exceed {self.MAX_OCCUPATION_LENGTH} characters",
                code="VALIDATION_ERROR"
            )

        now = datetime.now(timezone.utc)
        profile = {
            "name": name,
            "email": email,
            "age": age,
            "gender": gender,
            "occupation": occupation,
            "goals": list(dict.fromkeys(goals or [])),
            "updatedAt": now,
        }

        result = await self._users_collection.find_one_and_update(
            {"_id": user_id},
            {
                "$set": profile,
                "$setOnInsert": {"createdAt": now}
            },
            upsert=True,
            return_document=True
        )

        logger.info(f"Profile saved for user {user_id}")
        return result
