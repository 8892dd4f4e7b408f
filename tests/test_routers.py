"""HTTP-level tests for the API routers with mocked services."""

import pytest
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from bson import ObjectId
from fastapi import FastAPI
from fastapi.testclient import TestClient

from common.utils.exceptions import NotFoundException, ServiceUnavailableException
from neurosphere import dependencies
from neurosphere.routers import mood_router, sleep_router, therapist_router, user_router

USER = {"_id": "uid-1", "email": "ava@example.com", "claims": {}}


@pytest.fixture
def mood_service():
    service = MagicMock()
    for name in ("create_entry", "get_entry", "update_entry", "delete_entry", "list_entries",
                 "count_entries", "get_all_entries"):
        setattr(service, name, AsyncMock())
    return service


@pytest.fixture
def sleep_service():
    service = MagicMock()
    service.get_entry = AsyncMock()
    service.get_all_entries = AsyncMock(return_value=[])
    return service


@pytest.fixture
def therapist_client():
    client = MagicMock()
    client.chat = AsyncMock(return_value={"response": "Tell me more", "audio_base64": None})
    return client


@pytest.fixture
def user_context_service():
    service = MagicMock()
    service.get_context = AsyncMock(return_value={"age": 30, "gender": "Female"})
    service.save_profile = AsyncMock()
    return service


@pytest.fixture
def client(mood_service, sleep_service, therapist_client, user_context_service):
    app = FastAPI()
    for router in (mood_router, sleep_router, therapist_router, user_router):
        app.include_router(router, prefix="/api")

    app.dependency_overrides[dependencies.require_auth] = lambda: USER
    app.dependency_overrides[dependencies.get_mood_service] = lambda: mood_service
    app.dependency_overrides[dependencies.get_sleep_service] = lambda: sleep_service
    app.dependency_overrides[dependencies.get_therapist_client] = lambda: therapist_client
    app.dependency_overrides[dependencies.get_user_context_service] = lambda: user_context_service
    return TestClient(app)


class TestMoodRoutes:
    def test_create_entry(self, client, mood_service):
        entry_id = ObjectId()
        mood_service.create_entry.return_value = {
            "_id": entry_id,
            "mood": 4,
            "moodLabel": "Good",
            "activities": ["work"],
            "date": "2026-03-15",
            "time": "09:00",
            "timestamp": datetime(2026, 3, 15, 9, 0, tzinfo=timezone.utc),
        }

        response = client.post("/api/mood", json={
            "mood": 4,
            "activities": ["work"],
            "date": "2026-03-15",
            "time": "09:00",
        })

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["id"] == str(entry_id)
        assert mood_service.create_entry.call_args[0][0] == "uid-1"

    def test_create_rejects_out_of_range_mood(self, client, mood_service):
        response = client.post("/api/mood", json={"mood": 9, "date": "2026-03-15", "time": "09:00"})

        assert response.status_code == 422
        mood_service.create_entry.assert_not_called()

    def test_history_pagination(self, client, mood_service):
        mood_service.list_entries.return_value = []
        mood_service.count_entries.return_value = 0

        response = client.get("/api/mood?limit=10&offset=20")

        assert response.status_code == 200
        assert response.json()["data"] == {
            "entries": [],
            "total": 0,
            "limit": 10,
            "offset": 20,
            "hasMore": False,
        }
        mood_service.list_entries.assert_awaited_once_with("uid-1", limit=10, offset=20)

    def test_history_limit_capped(self, client):
        assert client.get("/api/mood?limit=500").status_code == 422

    def test_analytics_with_no_entries(self, client, mood_service):
        mood_service.get_all_entries.return_value = []

        response = client.get("/api/mood/analytics?timeframe=month")

        data = response.json()["data"]
        assert data["timeframe"] == "month"
        assert data["metrics"]["averageMood"] == 0
        assert data["metrics"]["moodTrend"] == "neutral"
        assert data["graph"] == []
        assert data["distribution"] == []

    def test_unknown_timeframe_falls_back_to_week(self, client, mood_service):
        mood_service.get_all_entries.return_value = []

        response = client.get("/api/mood/analytics?timeframe=decade")

        assert response.json()["data"]["timeframe"] == "week"

    def test_delete_missing_entry(self, client, mood_service):
        mood_service.delete_entry.side_effect = NotFoundException(
            "Mood entry not found", code="MOOD_ENTRY_NOT_FOUND"
        )

        response = client.delete(f"/api/mood/{ObjectId()}")

        assert response.status_code == 404
        assert response.json()["detail"]["code"] == "MOOD_ENTRY_NOT_FOUND"

    def test_calendar(self, client, mood_service):
        mood_service.get_all_entries.return_value = []

        response = client.get("/api/mood/calendar")

        assert response.status_code == 200
        assert response.json()["data"] == {"days": []}

    def test_analytics_with_populated_window(self, client, mood_service, make_mood):
        now = datetime.now(timezone.utc)
        moods = [2, 2, 2, 4, 5]
        energies = [1, 1, 2, 4, 5]
        mood_service.get_all_entries.return_value = [
            make_mood(mood, days_ago=4 - i, energy=energy, activities=["work"], now=now)
            for i, (mood, energy) in enumerate(zip(moods, energies))
        ]

        response = client.get("/api/mood/analytics?timeframe=week")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["metrics"]["averageMood"] == 3.0
        assert data["metrics"]["moodTrend"] == "improving"
        assert data["metrics"]["energyTrend"] == "increasing"
        assert data["metrics"]["recordCount"] == 5
        assert len(data["graph"]) == 5
        assert data["insights"]

    def test_get_entry(self, client, mood_service, make_mood):
        entry = make_mood(4)
        mood_service.get_entry.return_value = entry

        response = client.get(f"/api/mood/{entry['_id']}")

        assert response.status_code == 200
        assert response.json()["data"]["id"] == str(entry["_id"])
        mood_service.get_entry.assert_awaited_once_with("uid-1", str(entry["_id"]))

    def test_get_foreign_entry_not_found(self, client, mood_service):
        mood_service.get_entry.side_effect = NotFoundException(
            "Mood entry not found", code="MOOD_ENTRY_NOT_FOUND"
        )

        response = client.get(f"/api/mood/{ObjectId()}")

        assert response.status_code == 404


class TestSleepRoutes:
    def test_analytics_with_no_entries(self, client):
        response = client.get("/api/sleep/analytics")

        data = response.json()["data"]
        assert data["timeframe"] == "week"
        assert data["metrics"]["averageDuration"] == 0

    def test_analytics_formats_best_and_worst_days(self, client, sleep_service, make_sleep):
        now = datetime.now(timezone.utc)
        fair = make_sleep(480, quality=3, days_ago=2, now=now)
        best = make_sleep(480, quality=5, days_ago=1, now=now)
        worst = make_sleep(480, quality=2, days_ago=0, now=now)
        sleep_service.get_all_entries.return_value = [fair, best, worst]

        response = client.get("/api/sleep/analytics?timeframe=week")

        assert response.status_code == 200
        metrics = response.json()["data"]["metrics"]
        assert metrics["sleepDebtMinutes"] == 0
        assert metrics["averageDuration"] == 480
        assert metrics["bestQualityDay"]["id"] == str(best["_id"])
        assert metrics["bestQualityDay"]["sleepDate"] == best["sleepDate"].strftime("%Y-%m-%d")
        assert metrics["worstQualityDay"]["id"] == str(worst["_id"])
        assert response.json()["data"]["graph"][-1]["qualityLabel"] == "Fair"

    def test_get_entry(self, client, sleep_service, make_sleep):
        entry = make_sleep(420, quality=4)
        sleep_service.get_entry.return_value = entry

        response = client.get(f"/api/sleep/{entry['_id']}")

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["id"] == str(entry["_id"])
        assert data["sleepDate"] == "2026-03-15"


class TestTherapistRoutes:
    def test_chat_uses_profile_context(self, client, therapist_client):
        response = client.post("/api/therapist/chat", json={"message": "I feel anxious"})

        assert response.status_code == 200
        assert response.json()["data"]["response"] == "Tell me more"
        therapist_client.chat.assert_awaited_once_with(
            "uid-1", "I feel anxious", gender="Female", age=30
        )

    def test_chat_upstream_down(self, client, therapist_client):
        therapist_client.chat.side_effect = ServiceUnavailableException(
            "Therapist service is unavailable", code="THERAPIST_UNAVAILABLE"
        )

        response = client.post("/api/therapist/chat", json={"message": "Hello"})

        assert response.status_code == 503
        assert response.json()["detail"]["code"] == "THERAPIST_UNAVAILABLE"

    def test_chat_requires_message(self, client):
        assert client.post("/api/therapist/chat", json={"message": ""}).status_code == 422


class TestUserRoutes:
    def test_context(self, client):
        response = client.get("/api/user/context")

        assert response.json()["data"] == {"age": 30, "gender": "Female"}

    def test_profile_takes_email_from_token(self, client, user_context_service):
        user_context_service.save_profile.return_value = {
            "_id": "uid-1",
            "name": "Ava",
            "email": "ava@example.com",
            "age": 30,
            "gender": "Female",
            "occupation": None,
            "goals": [],
        }

        response = client.put("/api/user/profile", json={"name": "Ava", "age": 30, "gender": "Female"})

        assert response.status_code == 200
        assert response.json()["data"]["email"] == "ava@example.com"
        assert user_context_service.save_profile.call_args.kwargs["email"] == "ava@example.com"
