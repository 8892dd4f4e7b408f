"""Unit tests for MoodService (Motor-backed mood entries)."""

import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock
from bson import ObjectId

from common.utils.exceptions import NotFoundException, ValidationException
from neurosphere.services.mood.mood_service import MoodService


@pytest.fixture
def service(mock_db):
    return MoodService(mock_db)


@pytest.fixture
def entry_data():
    return {
        "mood": 4,
        "energyLevel": 3,
        "activities": ["work", "music", "work"],
        "note": "  Productive day  ",
        "date": "2026-03-15",
        "time": "18:30",
    }


# ─────────────────────────────────────────────────────────────────
# create_entry
# ─────────────────────────────────────────────────────────────────


class TestCreateEntry:
    @pytest.mark.asyncio
    async def test_inserts_document_for_user(self, service, mock_collection, sample_user_id, entry_data):
        inserted_id = ObjectId()
        mock_collection.insert_one.return_value = MagicMock(inserted_id=inserted_id)

        result = await service.create_entry(sample_user_id, entry_data)

        document = mock_collection.insert_one.call_args[0][0]
        assert document["userId"] == sample_user_id
        assert document["moodLabel"] == "Good"
        assert document["activities"] == ["work", "music"]
        assert document["note"] == "Productive day"
        assert document["timestamp"] == datetime(2026, 3, 15, 18, 30, tzinfo=timezone.utc)
        assert "createdAt" in document and "updatedAt" in document
        assert result["_id"] == inserted_id

    @pytest.mark.asyncio
    async def test_rejects_invalid_entry(self, service, mock_collection, sample_user_id, entry_data):
        entry_data["activities"] = ["skydiving"]

        with pytest.raises(ValidationException) as exc_info:
            await service.create_entry(sample_user_id, entry_data)

        assert exc_info.value.code == "VALIDATION_ERROR"
        mock_collection.insert_one.assert_not_called()


# ─────────────────────────────────────────────────────────────────
# update_entry / delete_entry
# ─────────────────────────────────────────────────────────────────


class TestUpdateEntry:
    @pytest.mark.asyncio
    async def test_scoped_by_user(self, service, mock_collection, sample_user_id, entry_data):
        entry_id = ObjectId()
        mock_collection.find_one_and_update.return_value = {"_id": entry_id, "mood": 4}

        await service.update_entry(sample_user_id, str(entry_id), entry_data)

        query = mock_collection.find_one_and_update.call_args[0][0]
        assert query == {"_id": entry_id, "userId": sample_user_id}

    @pytest.mark.asyncio
    async def test_foreign_entry_not_found(self, service, mock_collection, sample_user_id, entry_data):
        mock_collection.find_one_and_update.return_value = None

        with pytest.raises(NotFoundException) as exc_info:
            await service.update_entry(sample_user_id, str(ObjectId()), entry_data)

        assert exc_info.value.code == "MOOD_ENTRY_NOT_FOUND"


class TestDeleteEntry:
    @pytest.mark.asyncio
    async def test_deletes_own_entry(self, service, mock_collection, sample_user_id):
        entry_id = ObjectId()
        mock_collection.delete_one.return_value = MagicMock(deleted_count=1)

        await service.delete_entry(sample_user_id, str(entry_id))

        mock_collection.delete_one.assert_called_once_with({"_id": entry_id, "userId": sample_user_id})

    @pytest.mark.asyncio
    async def test_missing_entry_not_found(self, service, mock_collection, sample_user_id):
        mock_collection.delete_one.return_value = MagicMock(deleted_count=0)

        with pytest.raises(NotFoundException):
            await service.delete_entry(sample_user_id, str(ObjectId()))

    @pytest.mark.asyncio
    async def test_invalid_id_not_found(self, service, mock_collection, sample_user_id):
        with pytest.raises(NotFoundException) as exc_info:
            await service.delete_entry(sample_user_id, "not-an-id")

        assert exc_info.value.code == "MOOD_ENTRY_NOT_FOUND"
        mock_collection.delete_one.assert_not_called()


# ─────────────────────────────────────────────────────────────────
# Reads
# ─────────────────────────────────────────────────────────────────


class TestReads:
    @pytest.mark.asyncio
    async def test_list_entries_newest_first_with_capped_limit(
        self, service, mock_collection, sample_user_id, make_cursor
    ):
        cursor = make_cursor([{"_id": ObjectId(), "mood": 3}])
        mock_collection.find.return_value = cursor

        result = await service.list_entries(sample_user_id, limit=500, offset=10)

        mock_collection.find.assert_called_once_with({"userId": sample_user_id})
        cursor.sort.assert_called_once_with("timestamp", -1)
        cursor.skip.assert_called_once_with(10)
        cursor.limit.assert_called_once_with(100)
        assert len(result) == 1

    @pytest.mark.asyncio
    async def test_get_all_entries_ascending(self, service, mock_collection, sample_user_id, make_cursor):
        cursor = make_cursor([])
        mock_collection.find.return_value = cursor

        await service.get_all_entries(sample_user_id)

        cursor.sort.assert_called_once_with("timestamp", 1)
        cursor.to_list.assert_awaited_once_with(length=None)

    @pytest.mark.asyncio
    async def test_count_entries(self, service, mock_collection, sample_user_id):
        mock_collection.count_documents.return_value = 7

        assert await service.count_entries(sample_user_id) == 7
        mock_collection.count_documents.assert_awaited_once_with({"userId": sample_user_id})

    @pytest.mark.asyncio
    async def test_get_entry_missing(self, service, mock_collection, sample_user_id):
        mock_collection.find_one.return_value = None

        with pytest.raises(NotFoundException):
            await service.get_entry(sample_user_id, str(ObjectId()))

    @pytest.mark.asyncio
    async def test_list_entries_respects_configured_cap(self, mock_db, mock_collection, sample_user_id, make_cursor):
        cursor = make_cursor([])
        mock_collection.find.return_value = cursor

        await MoodService(mock_db, max_limit=20).list_entries(sample_user_id, limit=50)

        cursor.limit.assert_called_once_with(20)
