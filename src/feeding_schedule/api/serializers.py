"""JSON shapes returned by the HTTP API."""

from feeding_schedule.domain.schedule import (
    MealSlot,
    ScheduleConfig,
    ScheduleRunReport,
)


def config_payload(config: ScheduleConfig) -> dict[str, object]:
    return {
        "meals_per_day": config.meals_per_day,
        "window_start": config.window_start.isoformat(timespec="minutes"),
        "window_end": config.window_end.isoformat(timespec="minutes"),
    }


def slot_payload(slot: MealSlot) -> dict[str, object]:
    return {
        "serving_number": slot.serving_number,
        "status": slot.status,
        "scheduled_at": slot.scheduled_at.isoformat(),
    }


def report_payload(report: ScheduleRunReport) -> dict[str, object]:
    return {
        "config": config_payload(report.config),
        "config_created": report.config_created,
        "generated_months": [
            f"{year:04d}-{month:02d}" for year, month in report.generated_months
        ],
    }
