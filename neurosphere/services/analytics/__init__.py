"""Analytics services."""

from neurosphere.services.analytics.timeframe import TIMEFRAME_DAYS, select_timeframe
from neurosphere.services.analytics.metrics import (
    MoodMetrics,
    SleepMetrics,
    compute_metrics,
    compute_mood_metrics,
    compute_sleep_metrics,
)
from neurosphere.services.analytics.insights import (
    generate_mood_insights,
    generate_sleep_insights,
    select_sleep_tips,
)
from neurosphere.services.analytics.charts import (
    mood_calendar,
    mood_distribution,
    mood_graph,
    sleep_graph,
)

__all__ = [
    "TIMEFRAME_DAYS",
    "select_timeframe",
    "MoodMetrics",
    "SleepMetrics",
    "compute_metrics",
    "compute_mood_metrics",
    "compute_sleep_metrics",
    "generate_mood_insights",
    "generate_sleep_insights",
    "select_sleep_tips",
    "mood_calendar",
    "mood_distribution",
    "mood_graph",
    "sleep_graph",
]
