"""Shared test fixtures for NeuroSphere backend tests."""

import pytest
from datetime import datetime, timezone, timedelta
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId


NOW = datetime(2026, 3, 15, 12, 0, tzinfo=timezone.utc)


def _make_cursor(documents):
    """Motor-style cursor: chainable sort/skip/limit and an async to_list."""
    cursor = MagicMock()
    cursor.sort = MagicMock(return_value=cursor)
    cursor.skip = MagicMock(return_value=cursor)
    cursor.limit = MagicMock(return_value=cursor)
    cursor.to_list = AsyncMock(return_value=documents)
    return cursor


def _make_mood(mood, days_ago=0, energy=None, activities=None, now=NOW):
    timestamp = now - timedelta(days=days_ago)
    record = {
        "_id": ObjectId(),
        "userId": "firebase-uid-123",
        "mood": mood,
        "activities": activities or [],
        "date": timestamp.strftime("%Y-%m-%d"),
        "time": timestamp.strftime("%H:%M"),
        "timestamp": timestamp,
    }
    if energy is not None:
        record["energyLevel"] = energy
    return record


def _make_sleep(total_minutes, quality=3, days_ago=0, wake_mood="neutral", activities=None, now=NOW):
    sleep_date = (now - timedelta(days=days_ago)).replace(hour=0, minute=0)
    return {
        "_id": ObjectId(),
        "userId": "firebase-uid-123",
        "sleepDate": sleep_date,
        "bedTime": "23:00",
        "wakeTime": "07:00",
        "sleepDuration": {
            "hours": total_minutes // 60,
            "minutes": total_minutes % 60,
            "totalMinutes": total_minutes,
        },
        "sleepQuality": quality,
        "mood": wake_mood,
        "activities": activities or [],
    }


@pytest.fixture
def sample_user_id():
    return "firebase-uid-123"


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    # Motor's find() returns a cursor synchronously (not a coroutine),
    # so use MagicMock for it. Async methods like find_one, insert_one,
    # count_documents etc. stay as AsyncMock.
    collection.find = MagicMock()
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def make_cursor():
    return _make_cursor


@pytest.fixture
def make_mood():
    return _make_mood


@pytest.fixture
def make_sleep():
    return _make_sleep
