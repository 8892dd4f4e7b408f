"""
Timeframe selection.

Narrows a user's full record set to a trailing window ending now.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Dict, List, Optional

TIMEFRAME_DAYS = {
    "week": 7,
    "month": 30,
    "3months": 90,
    "year": 365,
}

DEFAULT_TIMEFRAME = "week"


def timeframe_days(timeframe: Optional[str]) -> int:
    """Number of days covered by a timeframe keyword (unknown keywords mean a week)."""
    return TIMEFRAME_DAYS.get(timeframe or DEFAULT_TIMEFRAME, TIMEFRAME_DAYS[DEFAULT_TIMEFRAME])


def as_utc(value: Any) -> Optional[datetime]:
    """
    Coerce a stored time value to an aware UTC datetime.

    Naive datetimes are read as UTC, plain dates as UTC midnight and
    ISO-8601 strings are parsed. Anything else yields None.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
        return as_utc(parsed)
    return None


def reference_time(record: Dict[str, Any]) -> Optional[datetime]:
    """The moment a record describes: `timestamp` for mood, `sleepDate` for sleep."""
    if "sleepDate" in record:
        return as_utc(record["sleepDate"])
    return as_utc(record.get("timestamp"))


def select_timeframe(
    records: List[Dict[str, Any]],
    timeframe: Optional[str],
    now: Optional[datetime] = None,
) -> List[Dict[str, Any]]:
    """
    Keep only the records inside the trailing window.

    Args:
        records: Mood or sleep records for one user
        timeframe: "week", "month", "3months" or "year"
        now: End of the window (defaults to current UTC time)

    Returns:
        Records whose reference time is at or after now minus the window
        length, in their original order. A record exactly on the boundary
        is kept.
    """
    end = as_utc(now) if now is not None else datetime.now(timezone.utc)
    start = end - timedelta(days=timeframe_days(timeframe))

    selected = []
    for record in records:
        moment = reference_time(record)
        if moment is not None and moment >= start:
            selected.append(record)
    return selected
