"""
Mood and sleep entry validation.

Validates entry fields against allowed ranges and fixed vocabularies.
"""

import re
from datetime import datetime
from typing import Tuple, Optional, Dict, Any, List

from config import MOOD_ACTIVITY_TAGS, SLEEP_ACTIVITY_OPTIONS, WAKE_MOOD_OPTIONS

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


class EntryValidator:
    """
    Validates mood and sleep entry fields.
    """

    SCORE_RANGE: Tuple[int, int] = (1, 5)

    MAX_NOTE_LENGTH = 1000

    @classmethod
    def validate_score(cls, name: str, value: Any, required: bool = True) -> Tuple[bool, Optional[str]]:
        """
        Validate a 1-5 score such as mood, energyLevel or sleepQuality.

        Args:
            name: Field name used in the error message
            value: Value to check
            required: Whether None is rejected

        Returns:
            tuple of (is_valid, error_message)
        """
        if value is None:
            if required:
                return False, f"Missing required field: {name}"
            return True, None

        if isinstance(value, bool) or not isinstance(value, int):
            return False, f"Field '{name}' must be an integer"

        min_val, max_val = cls.SCORE_RANGE
        if value < min_val or value > max_val:
            return False, f"Field '{name}' must be between {min_val} and {max_val}"

        return True, None

    @classmethod
    def validate_activities(
        cls,
        activities: Optional[List[str]],
        allowed: Dict[str, Any],
    ) -> Tuple[bool, Optional[str]]:
        """Check every activity tag belongs to the allowed vocabulary."""
        if activities is None:
            return True, None

        if not isinstance(activities, list):
            return False, "Activities must be a list"

        unknown = [a for a in activities if a not in allowed]
        if unknown:
            return False, f"Unknown activities: {', '.join(map(str, unknown))}"

        return True, None

    @classmethod
    def validate_note(cls, note: Optional[str], name: str = "note") -> Tuple[bool, Optional[str]]:
        """
        Validate optional free text.

        Rules:
            - Max 1000 characters after trimming
        """
        if note is None:
            return True, None

        if not isinstance(note, str):
            return False, f"Field '{name}' must be a string"

        if len(note.strip()) > cls.MAX_NOTE_LENGTH:
            return False, f"Field '{name}' cannot exceed {cls.MAX_NOTE_LENGTH} characters"

        return True, None

    @classmethod
    def validate_date(cls, value: Any, name: str = "date") -> Tuple[bool, Optional[str]]:
        """Validate a YYYY-MM-DD calendar date."""
        if not isinstance(value, str):
            return False, f"Missing required field: {name}"
        try:
            datetime.strptime(value, "%Y-%m-%d")
        except ValueError:
            return False, f"Field '{name}' must be a date in YYYY-MM-DD format"
        return True, None

    @classmethod
    def validate_time(cls, value: Any, name: str) -> Tuple[bool, Optional[str]]:
        """Validate an HH:MM 24-hour clock time."""
        if not isinstance(value, str) or not TIME_PATTERN.match(value):
            return False, f"Field '{name}' must be a time in HH:MM format"
        return True, None

    @classmethod
    def validate_mood_entry(cls, data: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
        """
        Validate a complete mood entry.

        Args:
            data: dict with mood, energyLevel, activities, note, date, time

        Returns:
            tuple of (is_valid, error_message)
        """
        checks = [
            cls.validate_score("mood", data.get("mood")),
            cls.validate_score("energyLevel", data.get("energyLevel"), required=False),
            cls.validate_activities(data.get("activities"), MOOD_ACTIVITY_TAGS),
            cls.validate_note(data.get("note")),
            cls.validate_date(data.get("date")),
            cls.validate_time(data.get("time"), "time"),
        ]
        for is_valid, error in checks:
            if not is_valid:
                return False, error
        return True, None

    @classmethod
    def validate_sleep_entry(cls, data: Dict[str, Any]) -> Tuple[bool, Optional[str]]:
        """
        Validate a complete sleep entry.

        Args:
            data: dict with sleepDate, bedTime, wakeTime, sleepQuality, mood,
                activities, notes

        Returns:
            tuple of (is_valid, error_message)
        """
        checks = [
            cls.validate_date(data.get("sleepDate"), "sleepDate"),
            cls.validate_time(data.get("bedTime"), "bedTime"),
            cls.validate_time(data.get("wakeTime"), "wakeTime"),
            cls.validate_score("sleepQuality", data.get("sleepQuality")),
            cls.validate_activities(data.get("activities"), SLEEP_ACTIVITY_OPTIONS),
            cls.validate_note(data.get("notes"), "notes"),
        ]
        for is_valid, error in checks:
            if not is_valid:
                return False, error

        if data.get("mood") not in WAKE_MOOD_OPTIONS:
            return False, f"Field 'mood' must be one of: {', '.join(WAKE_MOOD_OPTIONS)}"

        return True, None
