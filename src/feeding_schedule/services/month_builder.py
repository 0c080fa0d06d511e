"""Month schedule generation."""

import calendar
from datetime import date, datetime, timedelta

from feeding_schedule.domain.schedule import MealSlot, ScheduleConfig


def build_month(
    year: int, month: int, config: ScheduleConfig, interval: timedelta
) -> list[MealSlot]:
    """Return every meal slot of a calendar month in chronological order."""
    slots: list[MealSlot] = []
    for day_number in range(1, days_in_month(year, month) + 1):
        slots.extend(build_day(date(year, month, day_number), config, interval))
    return slots


def build_day(day: date, config: ScheduleConfig, interval: timedelta) -> list[MealSlot]:
    """Return the meal slots of a single day."""
    slots: list[MealSlot] = []
    cursor = datetime.combine(day, config.window_start)
    for serving_number in range(1, config.meals_per_day):
        slots.append(MealSlot(serving_number=serving_number, scheduled_at=cursor))
        cursor += interval
    # Last meal always lands on the window end, not on the cursor.
    slots.append(
        MealSlot(
            serving_number=config.meals_per_day,
            scheduled_at=datetime.combine(day, config.window_end),
        )
    )
    return slots


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_of(moment: datetime) -> tuple[int, int]:
    """Return the (year, month) pair of a timestamp."""
    return moment.year, moment.month


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return the (year, month) pair following the given month."""
    if month == 12:
        return year + 1, 1
    return year, month + 1
