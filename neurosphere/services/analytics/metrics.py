"""
Wellbeing metrics engine.

Pure aggregate statistics over a windowed list of mood or sleep records.
Records are the raw documents read from the entry collections. Nothing
here is rounded; rounding belongs to presentation.
"""

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from neurosphere.services.analytics.timeframe import reference_time

TREND_RECENT_COUNT = 5
TREND_MIN_RECORDS = 3
TREND_THRESHOLD = 0.5

TOP_MOOD_ACTIVITIES = 5
TOP_SLEEP_ACTIVITIES = 3
MAX_CORRELATIONS = 3
CORRELATION_MIN_PARTITION = 2

IDEAL_SLEEP_MINUTES = 8 * 60
CONSISTENCY_STDDEV_DIVISOR = 1.8


@dataclass
class MoodMetrics:
    """Aggregate view of a user's mood records in one window."""
    average_mood: float = 0.0
    mood_variability: float = 0.0
    most_frequent_mood: Optional[int] = None
    most_frequent_activities: List[str] = field(default_factory=list)
    mood_trend: str = "neutral"
    energy_trend: str = "neutral"
    correlations: List[Dict[str, Any]] = field(default_factory=list)
    record_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "averageMood": self.average_mood,
            "moodVariability": self.mood_variability,
            "mostFrequentMood": self.most_frequent_mood,
            "mostFrequentActivities": list(self.most_frequent_activities),
            "moodTrend": self.mood_trend,
            "energyTrend": self.energy_trend,
            "correlations": [dict(c) for c in self.correlations],
            "recordCount": self.record_count,
        }


@dataclass
class SleepMetrics:
    """Aggregate view of a user's sleep records in one window."""
    average_duration: float = 0.0
    average_quality: float = 0.0
    best_quality_day: Optional[Dict[str, Any]] = None
    worst_quality_day: Optional[Dict[str, Any]] = None
    most_common_mood: Optional[str] = None
    sleep_debt_minutes: float = 0.0
    consistency_score: float = 0.0
    common_activities: List[str] = field(default_factory=list)
    record_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "averageDuration": self.average_duration,
            "averageQuality": self.average_quality,
            "bestQualityDay": self.best_quality_day,
            "worstQualityDay": self.worst_quality_day,
            "mostCommonMood": self.most_common_mood,
            "sleepDebtMinutes": self.sleep_debt_minutes,
            "consistencyScore": self.consistency_score,
            "commonActivities": list(self.common_activities),
            "recordCount": self.record_count,
        }


# ─────────────────────────────────────────────────────────────────
# Shared helpers
# ─────────────────────────────────────────────────────────────────

def _mean(values: List[float]) -> float:
    return sum(values) / len(values)


def _population_stddev(values: List[float]) -> float:
    """Standard deviation dividing by N, not N-1."""
    mean = _mean(values)
    return math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))


def _top_activities(records: List[Dict[str, Any]], limit: int) -> List[str]:
    """Most used activity tags, count descending then tag ascending."""
    counts: Counter = Counter()
    for record in records:
        # duplicates inside one record count once
        counts.update(set(record.get("activities") or []))
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [activity for activity, _ in ranked[:limit]]


def _chronological(records: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return sorted(records, key=reference_time)


def detect_trend(values: List[float], up: str, down: str) -> str:
    """
    Classify the direction of the most recent values.

    Args:
        values: Values ordered oldest to newest
        up: Label returned when the recent half is higher
        down: Label returned when the recent half is lower

    Returns:
        up, down or "neutral"

    Of the last five values, the first ceil(n/2) are compared against the
    values from index floor(n/2) onward, so both halves share the middle
    value when n is odd.
    """
    if len(values) < TREND_MIN_RECORDS:
        return "neutral"

    recent = values[-TREND_RECENT_COUNT:]
    n = len(recent)
    first_half = recent[:math.ceil(n / 2)]
    second_half = recent[n // 2:]

    difference = _mean(second_half) - _mean(first_half)
    if difference > TREND_THRESHOLD:
        return up
    if -difference > TREND_THRESHOLD:
        return down
    return "neutral"


# ─────────────────────────────────────────────────────────────────
# Mood
# ─────────────────────────────────────────────────────────────────

def compute_mood_metrics(records: List[Dict[str, Any]]) -> MoodMetrics:
    """
    Compute mood statistics for a window of mood records.

    Args:
        records: Mood records in any order

    Returns:
        MoodMetrics (zero/neutral/empty when there are no records)
    """
    if not records:
        return MoodMetrics()

    moods = [record["mood"] for record in records]

    mood_counts = Counter(moods)
    highest = max(mood_counts.values())
    most_frequent_mood = min(mood for mood, count in mood_counts.items() if count == highest)

    top_activities = _top_activities(records, TOP_MOOD_ACTIVITIES)

    ordered = _chronological(records)
    mood_trend = detect_trend(
        [record["mood"] for record in ordered], "improving", "declining"
    )

    energy_trend = "neutral"
    if len(records) >= TREND_MIN_RECORDS:
        energies = [
            record["energyLevel"] for record in ordered
            if record.get("energyLevel") is not None
        ]
        energy_trend = detect_trend(energies, "increasing", "decreasing")

    return MoodMetrics(
        average_mood=_mean(moods),
        mood_variability=_population_stddev(moods),
        most_frequent_mood=most_frequent_mood,
        most_frequent_activities=top_activities,
        mood_trend=mood_trend,
        energy_trend=energy_trend,
        correlations=_activity_correlations(records, top_activities),
        record_count=len(records),
    )


def _activity_correlations(
    records: List[Dict[str, Any]],
    activities: List[str],
) -> List[Dict[str, Any]]:
    """
    Mood impact of each activity: mean mood with it minus mean mood without.

    Activities whose "with" or "without" group has fewer than two records
    are left out.
    """
    correlations = []
    for activity in activities:
        with_activity = []
        without_activity = []
        for record in records:
            if activity in (record.get("activities") or []):
                with_activity.append(record["mood"])
            else:
                without_activity.append(record["mood"])

        if (
            len(with_activity) >= CORRELATION_MIN_PARTITION
            and len(without_activity) >= CORRELATION_MIN_PARTITION
        ):
            correlations.append({
                "activity": activity,
                "impact": _mean(with_activity) - _mean(without_activity),
                "count": len(with_activity),
            })

    correlations.sort(key=lambda c: abs(c["impact"]), reverse=True)
    return correlations[:MAX_CORRELATIONS]


# ─────────────────────────────────────────────────────────────────
# Sleep
# ─────────────────────────────────────────────────────────────────

def total_minutes(record: Dict[str, Any]) -> int:
    return (record.get("sleepDuration") or {}).get("totalMinutes", 0)


def compute_sleep_metrics(records: List[Dict[str, Any]]) -> SleepMetrics:
    """
    Compute sleep statistics for a window of sleep records.

    Args:
        records: Sleep records in any order

    Returns:
        SleepMetrics (zero/null/empty when there are no records)

    Sleep debt is measured against eight hours a night and goes negative
    on surplus. The consistency score maps a duration standard deviation
    of 180 minutes or more to 0 and no deviation to 100.
    """
    if not records:
        return SleepMetrics()

    durations = [total_minutes(record) for record in records]
    qualities = [record["sleepQuality"] for record in records]

    # stable sort: best is the first top-rated record, worst the last lowest-rated one
    by_quality = sorted(records, key=lambda r: r["sleepQuality"], reverse=True)

    wake_moods = Counter(record["mood"] for record in records if record.get("mood"))
    most_common_mood = None
    if wake_moods:
        highest = max(wake_moods.values())
        most_common_mood = min(mood for mood, count in wake_moods.items() if count == highest)

    consistency = 100 - _population_stddev(durations) / CONSISTENCY_STDDEV_DIVISOR

    return SleepMetrics(
        average_duration=_mean(durations),
        average_quality=_mean(qualities),
        best_quality_day=by_quality[0],
        worst_quality_day=by_quality[-1],
        most_common_mood=most_common_mood,
        sleep_debt_minutes=len(records) * IDEAL_SLEEP_MINUTES - sum(durations),
        consistency_score=max(0.0, min(100.0, consistency)),
        common_activities=_top_activities(records, TOP_SLEEP_ACTIVITIES),
        record_count=len(records),
    )


def is_sleep_record(record: Dict[str, Any]) -> bool:
    return "sleepQuality" in record or "sleepDuration" in record


def compute_metrics(records: List[Dict[str, Any]]) -> Union[MoodMetrics, SleepMetrics]:
    """
    Compute the metrics snapshot matching the kind of records given.

    An empty list yields an empty MoodMetrics.
    """
    if records and is_sleep_record(records[0]):
        return compute_sleep_metrics(records)
    return compute_mood_metrics(records)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (2.5 -> 3)."""
    return math.floor(value + 0.5)
