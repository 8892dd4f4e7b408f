"""
Chart series for the mood and sleep dashboards.
"""

import calendar
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from config import MOOD_OPTIONS, SLEEP_QUALITY_OPTIONS
from neurosphere.services.analytics.metrics import round_half_up, total_minutes
from neurosphere.services.analytics.timeframe import reference_time

GRAPH_POINTS = 14


def _graph_date(moment: datetime) -> str:
    return moment.strftime("%b %d")


def mood_graph(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Latest mood records, oldest first, shaped for a line chart."""
    points = []
    for record in sorted(records, key=reference_time)[-GRAPH_POINTS:]:
        moment = reference_time(record)
        option = MOOD_OPTIONS.get(record["mood"])
        points.append({
            "date": _graph_date(moment),
            "shortDate": moment.strftime("%d"),
            "time": moment.strftime("%I:%M %p").lstrip("0"),
            "mood": record["mood"],
            "energy": record.get("energyLevel"),
            "label": option["label"] if option else None,
        })
    return points


def mood_distribution(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Count and share of each mood value, best mood first.

    Returns an empty list when there are no records.
    """
    if not records:
        return []

    counts: Dict[int, int] = {}
    for record in records:
        counts[record["mood"]] = counts.get(record["mood"], 0) + 1

    distribution = []
    for value, option in MOOD_OPTIONS.items():
        count = counts.get(value, 0)
        distribution.append({
            "mood": value,
            "label": option["label"],
            "emoji": option["emoji"],
            "count": count,
            "percentage": round_half_up(count / len(records) * 100),
        })
    return distribution


def mood_calendar(
    records: List[Dict[str, Any]],
    today: Optional[date] = None,
) -> List[Dict[str, Any]]:
    """
    One cell per day of the current month.

    Days with entries carry the rounded average mood of that day. Entries
    are matched on their `date` field (YYYY-MM-DD).
    """
    if not records:
        return []

    today = today or datetime.now(timezone.utc).date()

    by_day: Dict[str, List[int]] = {}
    for record in records:
        by_day.setdefault(record.get("date"), []).append(record["mood"])

    days_in_month = calendar.monthrange(today.year, today.month)[1]
    cells = []
    for day in range(1, days_in_month + 1):
        key = date(today.year, today.month, day).isoformat()
        moods = by_day.get(key)
        if not moods:
            cells.append({"date": key, "day": str(day), "hasEntry": False})
            continue

        average = round_half_up(sum(moods) / len(moods))
        option = MOOD_OPTIONS.get(average)
        cells.append({
            "date": key,
            "day": str(day),
            "hasEntry": True,
            "mood": average,
            "label": option["label"] if option else None,
        })
    return cells


def sleep_graph(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Latest sleep records, oldest first, as hours slept and labelled quality."""
    points = []
    for record in sorted(records, key=reference_time)[-GRAPH_POINTS:]:
        points.append({
            "date": _graph_date(reference_time(record)),
            "hours": total_minutes(record) / 60,
            "quality": record["sleepQuality"],
            "qualityLabel": SLEEP_QUALITY_OPTIONS.get(record["sleepQuality"]),
        })
    return points
