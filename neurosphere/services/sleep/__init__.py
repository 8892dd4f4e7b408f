"""Sleep services."""

from neurosphere.services.sleep.sleep_service import SleepService, calculate_sleep_duration

__all__ = ["SleepService", "calculate_sleep_duration"]
