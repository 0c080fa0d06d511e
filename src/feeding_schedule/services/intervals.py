"""Interval calculation between meals."""

from datetime import timedelta

from feeding_schedule.domain.schedule import INTERVAL_STEP_SECONDS, ScheduleConfig


def compute_interval(config: ScheduleConfig) -> timedelta:
    """Return the gap between consecutive meals, rounded down to 5 minutes.

    The last meal of a day is pinned to the window end, so whatever the
    rounding drops is absorbed by the final gap of the day.
    """
    config.validate()
    raw_seconds = config.window_length().total_seconds() / (config.meals_per_day - 1)
    rounded_seconds = int(raw_seconds // INTERVAL_STEP_SECONDS) * INTERVAL_STEP_SECONDS
    return timedelta(seconds=rounded_seconds)
