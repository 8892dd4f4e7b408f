"""
Mood entry CRUD service.

Handles mood entry storage and retrieval operations.
"""

import logging
from datetime import datetime, timezone
from typing import List, Dict, Any

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.utils.exceptions import NotFoundException, ValidationException
from config import MOOD_OPTIONS
from neurosphere.database.collections import MOOD_COLLECTION
from neurosphere.services.entries.entry_ids import parse_entry_id
from neurosphere.services.entries.entry_validator import EntryValidator

logger = logging.getLogger(__name__)


def build_timestamp(date_str: str, time_str: str) -> datetime:
    """Combine a YYYY-MM-DD date and HH:MM time into a UTC datetime."""
    return datetime.strptime(f"{date_str} {time_str}", "%Y-%m-%d %H:%M").replace(tzinfo=timezone.utc)


class MoodService:
    """
    Handles mood entry storage and retrieval.
    Pure CRUD - analytics run over the records it returns.
    """

    DEFAULT_MAX_LIMIT = 100

    def __init__(self, db: AsyncIOMotorDatabase, max_limit: int = DEFAULT_MAX_LIMIT):
        """
        Initialize MoodService.

        Args:
            db: MongoDB database connection
            max_limit: Largest history page a caller may request
        """
        self._db = db
        self._collection = db[MOOD_COLLECTION]
        self._max_limit = max_limit

    def _build_document(self, data: Dict[str, Any]) -> Dict[str, Any]:
        is_valid, error = EntryValidator.validate_mood_entry(data)
        if not is_valid:
            raise ValidationException(message=error, code="VALIDATION_ERROR")

        note = data.get("note")
        return {
            "mood": data["mood"],
            "moodLabel": MOOD_OPTIONS[data["mood"]]["label"],
            "energyLevel": data.get("energyLevel"),
            "activities": list(dict.fromkeys(data.get("activities") or [])),
            "note": note.strip() if note else None,
            "date": data["date"],
            "time": data["time"],
            "timestamp": build_timestamp(data["date"], data["time"]),
        }

    async def create_entry(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a mood entry.

        Args:
            user_id: Identity provider user ID
            data: dict with mood, energyLevel, activities, note, date, time

        Returns:
            Saved mood document

        Raises:
            ValidationException: Fields out of range or unknown activities
        """
        document = self._build_document(data)
        now = datetime.now(timezone.utc)
        document.update({
            "userId": user_id,
            "createdAt": now,
            "updatedAt": now,
        })

        result = await self._collection.insert_one(document)
        document["_id"] = result.inserted_id

        logger.info(f"Mood entry created for user {user_id} on {document['date']}")
        return document

    async def update_entry(
        self,
        user_id: str,
        entry_id: str,
        data: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Replace the editable fields of a user's mood entry.

        Raises:
            ValidationException: Fields out of range or unknown activities
            NotFoundException: Entry missing or owned by someone else
        """
        object_id = parse_entry_id(entry_id, "MOOD_ENTRY_NOT_FOUND")
        document = self._build_document(data)
        document["updatedAt"] = datetime.now(timezone.utc)

        result = await self._collection.find_one_and_update(
            {"_id": object_id, "userId": user_id},
            {"$set": document},
            return_document=True
        )

        if not result:
            raise NotFoundException(message="Mood entry not found", code="MOOD_ENTRY_NOT_FOUND")

        logger.info(f"Mood entry {entry_id} updated for user {user_id}")
        return result

    async def delete_entry(self, user_id: str, entry_id: str) -> None:
        """
        Delete a user's mood entry.

        Raises:
            NotFoundException: Entry missing or owned by someone else
        """
        object_id = parse_entry_id(entry_id, "MOOD_ENTRY_NOT_FOUND")

        result = await self._collection.delete_one({"_id": object_id, "userId": user_id})

        if result.deleted_count == 0:
            raise NotFoundException(message="Mood entry not found", code="MOOD_ENTRY_NOT_FOUND")

        logger.info(f"Mood entry {entry_id} deleted for user {user_id}")

    async def get_entry(self, user_id: str, entry_id: str) -> Dict[str, Any]:
        """Get one of the user's mood entries."""
        object_id = parse_entry_id(entry_id, "MOOD_ENTRY_NOT_FOUND")

        entry = await self._collection.find_one({"_id": object_id, "userId": user_id})
        if not entry:
            raise NotFoundException(message="Mood entry not found", code="MOOD_ENTRY_NOT_FOUND")
        return entry

    async def list_entries(
        self,
        user_id: str,
        limit: int = 30,
        offset: int = 0
    ) -> List[Dict[str, Any]]:
        """
        Get paginated mood history.

        Args:
            user_id: Identity provider user ID
            limit: Max records to return (capped at max_limit)
            offset: Number of records to skip

        Returns:
            List of mood dicts, newest first
        """
        limit = min(limit, self._max_limit)

        cursor = self._collection.find({"userId": user_id})
        cursor = cursor.sort("timestamp", -1)
        cursor = cursor.skip(offset)
        cursor = cursor.limit(limit)

        return await cursor.to_list(length=limit)

    async def count_entries(self, user_id: str) -> int:
        """Total number of mood entries for a user."""
        return await self._collection.count_documents({"userId": user_id})

    async def get_all_entries(self, user_id: str) -> List[Dict[str, Any]]:
        """
        Get every mood entry for a user.
        Used as the analytics feed.

        Returns:
            List of mood dicts sorted by timestamp ascending
        """
        cursor = self._collection.find({"userId": user_id})
        cursor = cursor.sort("timestamp", 1)

        return await cursor.to_list(length=None)
