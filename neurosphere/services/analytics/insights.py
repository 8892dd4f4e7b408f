"""
Insight generation.

Turns a metrics snapshot into an ordered list of plain-language
observations, plus the sleep-hygiene tips for the user's quality tier.
"""

from typing import List

from config import MOOD_ACTIVITY_TAGS, MOOD_OPTIONS, SLEEP_TIPS
from neurosphere.services.analytics.metrics import MoodMetrics, SleepMetrics, round_half_up

POSITIVE_MOOD_THRESHOLD = 3.5
LOW_MOOD_THRESHOLD = 2.5
CORRELATION_THRESHOLD = 0.5
HIGH_VARIABILITY = 1.2
LOW_VARIABILITY = 0.5
LOW_VARIABILITY_MIN_RECORDS = 5
GENERIC_INSIGHT_BELOW = 3
LOG_MORE_INSIGHT_BELOW = 4
LOG_MORE_RECORD_BELOW = 10

SHORT_SLEEP_MINUTES = 420
LONG_SLEEP_MINUTES = 540


# ─────────────────────────────────────────────────────────────────
# Mood
# ─────────────────────────────────────────────────────────────────

def mood_label(value: float) -> str:
    """Label of the mood option nearest to value, or "Neutral"."""
    option = MOOD_OPTIONS.get(round_half_up(value))
    return option["label"] if option else "Neutral"


def _activity_names(correlations: List[dict]) -> str:
    names = []
    for correlation in correlations:
        tag = MOOD_ACTIVITY_TAGS.get(correlation["activity"])
        names.append(f"{tag['icon']} {tag['label']}" if tag else correlation["activity"])
    return ", ".join(names)


def generate_mood_insights(metrics: MoodMetrics, record_count: int) -> List[str]:
    """
    Build mood observations in priority order.

    Args:
        metrics: Snapshot for the window
        record_count: Number of records in the window

    Returns:
        At least one insight sentence
    """
    if record_count == 0:
        return ["Start logging your moods to receive personalized insights."]

    insights = []

    if metrics.average_mood > POSITIVE_MOOD_THRESHOLD:
        framing = "That's great! Keep engaging in activities that boost your wellbeing."
    elif metrics.average_mood < LOW_MOOD_THRESHOLD:
        framing = "Consider focusing more on self-care and activities that spark joy."
    else:
        framing = "Your emotional state is balanced, but there's room for improvement."
    insights.append(
        f"Your average mood has been {mood_label(metrics.average_mood).lower()} "
        f"during this period. {framing}"
    )

    if record_count >= 3:
        if metrics.mood_trend == "improving":
            insights.append(
                "Your mood has been improving recently. Whatever you're doing seems "
                "to be working well for your mental health."
            )
        elif metrics.mood_trend == "declining":
            insights.append(
                "Your mood has been declining recently. This might be a good time to "
                "reflect on stressors in your life and consider additional self-care."
            )
        else:
            insights.append(
                "Your mood has been relatively stable recently. Consistency can be "
                "positive, especially if you're feeling good overall."
            )

    positive = [c for c in metrics.correlations if c["impact"] > CORRELATION_THRESHOLD]
    negative = [c for c in metrics.correlations if c["impact"] < -CORRELATION_THRESHOLD]

    if positive:
        insights.append(
            f"Activities associated with improved mood: {_activity_names(positive)}. "
            "Consider prioritizing these in your routine."
        )
    if negative:
        insights.append(
            f"Activities associated with lower mood: {_activity_names(negative)}. "
            "Consider how to manage or balance these activities."
        )

    if metrics.mood_variability > HIGH_VARIABILITY:
        insights.append(
            "Your mood shows significant variability. While some fluctuation is normal, "
            "extreme swings might indicate a need for mood stabilizing activities like "
            "meditation or consistent sleep patterns."
        )
    elif metrics.mood_variability < LOW_VARIABILITY and record_count > LOW_VARIABILITY_MIN_RECORDS:
        insights.append(
            "Your mood is very consistent. This stability can be beneficial, though "
            "remember it's also normal to experience a range of emotions."
        )

    if metrics.energy_trend == "increasing":
        insights.append(
            "Your energy levels appear to be improving. This often correlates with "
            "better sleep, nutrition, or physical activity."
        )
    elif metrics.energy_trend == "decreasing":
        insights.append(
            "Your energy levels seem to be decreasing. Consider evaluating your sleep "
            "quality, stress levels, and physical activity."
        )

    if len(insights) < GENERIC_INSIGHT_BELOW:
        insights.append(
            "Regular mood tracking helps identify patterns that affect your emotional "
            "wellbeing, allowing for more informed self-care decisions."
        )
    if len(insights) < LOG_MORE_INSIGHT_BELOW and record_count < LOG_MORE_RECORD_BELOW:
        insights.append(
            "Continue logging your moods to receive more personalized insights. More "
            "data leads to more accurate patterns and correlations."
        )

    return insights


# ─────────────────────────────────────────────────────────────────
# Sleep
# ─────────────────────────────────────────────────────────────────

def generate_sleep_insights(metrics: SleepMetrics, record_count: int) -> List[str]:
    """Build sleep observations covering duration, quality, consistency and habits."""
    if record_count == 0:
        return ["Start logging your sleep to get personalized insights."]

    insights = []

    if metrics.average_duration < SHORT_SLEEP_MINUTES:
        insights.append(
            "You're averaging less than 7 hours of sleep, which may not be sufficient "
            "for optimal health and functioning. Consider going to bed earlier or "
            "adjusting your schedule to allow for more rest."
        )
    elif metrics.average_duration > LONG_SLEEP_MINUTES:
        insights.append(
            "You're sleeping more than 9 hours on average. While some people naturally "
            "need more sleep, excessive sleep can sometimes be linked to health "
            "conditions or poor sleep quality. If you're still feeling tired despite "
            "long sleep, consider consulting a healthcare professional."
        )
    else:
        insights.append(
            "Your average sleep duration falls within the recommended 7-9 hours for "
            "adults. Great job maintaining a healthy sleep duration!"
        )

    if metrics.average_quality < 3:
        insights.append(
            "Your sleep quality seems to be below average. Try implementing good sleep "
            "hygiene practices like maintaining a consistent schedule and creating a "
            "comfortable sleep environment."
        )
    elif metrics.average_quality >= 4:
        insights.append(
            "You're reporting excellent sleep quality! Continue your current sleep "
            "habits to maintain this positive pattern."
        )

    if metrics.consistency_score < 60:
        insights.append(
            "Your sleep schedule shows significant variation. Maintaining consistent "
            "sleep and wake times, even on weekends, can improve your sleep quality "
            "and overall well-being."
        )
    elif metrics.consistency_score > 80:
        insights.append(
            "You have a very consistent sleep schedule, which is excellent for your "
            "circadian rhythm and sleep quality."
        )

    activities = set(metrics.common_activities)
    if "screen" in activities:
        insights.append(
            "Screen time before bed appears frequently in your records. The blue light "
            "from screens can interfere with melatonin production. Consider using night "
            "mode on devices or avoiding screens 1-2 hours before bedtime."
        )
    if activities & {"caffeine", "alcohol"}:
        insights.append(
            "Caffeine and/or alcohol consumption may be affecting your sleep. These "
            "substances can disrupt sleep architecture and quality, even if they don't "
            "prevent you from falling asleep."
        )
    if activities & {"meditation", "reading"}:
        insights.append(
            "Your bedtime routine includes relaxing activities like reading or "
            "meditation, which are excellent practices for promoting quality sleep."
        )

    return insights


def select_sleep_tips(metrics: SleepMetrics, record_count: int) -> List[str]:
    """Pick the tip list for the window's average sleep quality."""
    if record_count == 0:
        tier = "moderate"
    elif metrics.average_quality < 2.5:
        tier = "poor"
    elif metrics.average_quality < 4:
        tier = "moderate"
    else:
        tier = "good"
    return list(SLEEP_TIPS[tier])
