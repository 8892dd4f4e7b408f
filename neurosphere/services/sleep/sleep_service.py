"""
Sleep entry CRUD service.

Handles sleep entry storage and retrieval, including the stored
duration computed from bed and wake times.
"""

import logging
from datetime import datetime, timezone
from typing import List, Dict, Any

from motor.motor_asyncio import AsyncIOMotorDatabase

from common.utils.exceptions import NotFoundException, ValidationException
from neurosphere.database.collections import SLEEP_COLLECTION
from neurosphere.services.entries.entry_validator import EntryValidator
from neurosphere.services.entries.entry_ids import parse_entry_id

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60


def _minutes_past_midnight(clock: str) -> int:
    hours, minutes = clock.split(":")
    return int(hours) * 60 + int(minutes)


def calculate_sleep_duration(bed_time: str, wake_time: str) -> Dict[str, int]:
    """
    Length of a sleep period given HH:MM bed and wake times.

    A wake time earlier than the bed time means the sleep crossed
    midnight. Equal times give zero.

    Returns:
        dict with hours, minutes, totalMinutes
    """
    bed = _minutes_past_midnight(bed_time)
    wake = _minutes_past_midnight(wake_time)
    if wake < bed:
        wake += MINUTES_PER_DAY

    total = wake - bed
    return {
        "hours": total // 60,
        "minutes": total % 60,
        "totalMinutes": total,
    }


class SleepService:
    """
    Handles sleep entry storage and retrieval.
    """

    DEFAULT_MAX_LIMIT = 100

    def __init__(self, db: AsyncIOMotorDatabase, max_limit: int = DEFAULT_MAX_LIMIT):
        """
        Initialize SleepService.

        Args:
            db: MongoDB database connection
            max_limit: Largest history page a caller may request
        """
        self._db = db
        self._collection = db[SLEEP_COLLECTION]
        self._max_limit = max_limit

    def _build_document(self, data: Dict[str, Any]) -> Dict[str, Any]:
        is_valid, error = EntryValidator.validate_sleep_entry(data)
        if not is_valid:
            raise ValidationException(message=error, code="VALIDATION_ERROR")

        notes = data.get("notes")
        return {
            "sleepDate": datetime.strptime(data["sleepDate"], "%Y-%m-%d").replace(tzinfo=timezone.utc),
            "bedTime": data["bedTime"],
            "wakeTime": data["wakeTime"],
            "sleepDuration": calculate_sleep_duration(data["bedTime"], data["wakeTime"]),
            "sleepQuality": data["sleepQuality"],
            "mood": data["mood"],
            "activities": list(dict.fromkeys(data.get("activities") or [])),
            "notes": notes.strip() if notes else None,
        }

    async def create_entry(self, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a sleep entry.

        Args:
            user_id: Identity provider user ID
            data: dict with sleepDate, bedTime, wakeTime, sleepQuality, mood,
                activities, notes

        Returns:
            Saved sleep document

        Raises:
            ValidationException: Invalid times, scores or vocabulary
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

        logger.info(
            f"Sleep entry created for user {user_id}: "
            f"{document['sleepDuration']['totalMinutes']} minutes"
        )
        return document

    async def update_entry(
        self,
        user_id: str,
        entry_id: str,
        data: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Replace the editable fields of a user's sleep entry.
        The duration is recomputed from the new times.

        Raises:
            ValidationException: Invalid times, scores or vocabulary
            NotFoundException: Entry missing or owned by someone else
        """
        object_id = parse_entry_id(entry_id, "SLEEP_ENTRY_NOT_FOUND")
        document = self._build_document(data)
        document["updatedAt"] = datetime.now(timezone.utc)

        result = await self._collection.find_one_and_update(
            {"_id": object_id, "userId": user_id},
            {"$set": document},
            return_document=True
        )

        if not result:
            raise NotFoundException(message="Sleep entry not found", code="SLEEP_ENTRY_NOT_FOUND")

        logger.info(f"Sleep entry {entry_id} updated for user {user_id}")
        return result

    async def delete_entry(self, user_id: str, entry_id: str) -> None:
        """
        Delete a user's sleep entry.

        Raises:
            NotFoundException: Entry missing or owned by someone else
        """
        object_id = parse_entry_id(entry_id, "SLEEP_ENTRY_NOT_FOUND")

        result = await self._collection.delete_one({"_id": object_id, "userId": user_id})

        if result.deleted_count == 0:
            raise NotFoundException(message="Sleep entry not found", code="SLEEP_ENTRY_NOT_FOUND")

        logger.info(f"Sleep entry {entry_id} deleted for user {user_id}")

    async def get_entry(self, user_id: str, entry_id: str) -> Dict[str, Any]:
        """Get one of the user's sleep entries."""
        object_id = parse_entry_id(entry_id, "SLEEP_ENTRY_NOT_FOUND")

        entry = await self._collection.find_one({"_id": object_id, "userId": user_id})
        if not entry:
            raise NotFoundException(message="Sleep entry not found", code="SLEEP_ENTRY_NOT_FOUND")
        return entry

    async def list_entries(
        self,
        user_id: str,
        limit: int = 30,
        offset: int = 0
    ) -> List[Dict[str, Any]]:
        """
        Get paginated sleep history, newest sleep date first.

        Args:
            user_id: Identity provider user ID
            limit: Max records to return (capped at max_limit)
            offset: Number of records to skip
        """
        limit = min(limit, self._max_limit)

        cursor = self._collection.find({"userId": user_id})
        cursor = cursor.sort("sleepDate", -1)
        cursor = cursor.skip(offset)
        cursor = cursor.limit(limit)

        return await cursor.to_list(length=limit)

    async def count_entries(self, user_id: str) -> int:
        """Total number of sleep entries for a user."""
        return await self._collection.count_documents({"userId": user_id})

    async def get_all_entries(self, user_id: str) -> List[Dict[str, Any]]:
        """
        Get every sleep entry for a user, oldest sleep date first.
        Used as the analytics feed.
        """
        cursor = self._collection.find({"userId": user_id})
        cursor = cursor.sort("sleepDate", 1)

        return await cursor.to_list(length=None)
