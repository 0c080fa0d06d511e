"""Feeding schedule orchestration."""

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol

from feeding_schedule.domain.errors import PersistenceError
from feeding_schedule.domain.schedule import (
    MealSlot,
    ScheduleConfig,
    ScheduleRunReport,
    WriteResult,
)
from feeding_schedule.services.intervals import compute_interval
from feeding_schedule.services.month_builder import build_month, month_of, next_month

logger = logging.getLogger(__name__)


class ScheduleStore(Protocol):
    """Persistence interface for the schedule config and meal slots."""

    def config_exists(self) -> bool:
        """Return True when a config row is stored."""

    def load_config(self) -> ScheduleConfig:
        """Return the stored config."""

    def save_config(self, config: ScheduleConfig) -> WriteResult:
        """Persist the config."""

    def any_meal_slot_exists(self) -> bool:
        """Return True when at least one meal slot is stored."""

    def max_scheduled_month(self) -> int | None:
        """Return the month of year of the latest meal slot, if any."""

    def save_meal_slots(self, slots: list[MealSlot]) -> WriteResult:
        """Persist a batch of meal slots, all or none."""

    def list_meal_slots(self, start: datetime, end: datetime) -> list[MealSlot]:
        """Return meal slots scheduled in [start, end), oldest first."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ScheduleService:
    """Keeps the current and next month of meal slots generated."""

    store: ScheduleStore
    default_config: ScheduleConfig = field(default_factory=ScheduleConfig)
    clock: Callable[[], datetime] = _utc_now
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def initialize(self) -> ScheduleRunReport:
        """Run the config, current month and next month steps in order.

        Passes are serialized so concurrent callers cannot both see an empty
        store and insert the same month. A store failure aborts the pass; the
        steps already committed stay.
        """
        with self._lock:
            return self._initialize()

    def _initialize(self) -> ScheduleRunReport:
        generated: list[tuple[int, int]] = []
        step = "ensure config"
        try:
            config, created = self.ensure_config()
            step = "ensure current month"
            current = self.ensure_current_month(config)
            if current is not None:
                generated.append(current)
            step = "ensure next month"
            upcoming = self.ensure_next_month(config)
            if upcoming is not None:
                generated.append(upcoming)
        except PersistenceError:
            logger.exception("Schedule initialization failed during %s", step)
            raise
        return ScheduleRunReport(
            config=config, config_created=created, generated_months=generated
        )

    def ensure_config(self) -> tuple[ScheduleConfig, bool]:
        """Return the stored config, persisting the defaults when absent."""
        if self.store.config_exists():
            config = self.store.load_config()
            config.validate()
            logger.info("Schedule config found in store")
            return config, False

        config = self.default_config
        config.validate()
        _check_write(self.store.save_config(config), step="save schedule config")
        logger.info(
            "Schedule config saved: %s meals between %s and %s",
            config.meals_per_day,
            config.window_start.isoformat(timespec="minutes"),
            config.window_end.isoformat(timespec="minutes"),
        )
        return config, True

    def ensure_current_month(self, config: ScheduleConfig) -> tuple[int, int] | None:
        """Generate the current month unless any meal slot is already stored."""
        if self.store.any_meal_slot_exists():
            logger.info("Meal slots found in store, current month left as is")
            return None
        year, month = month_of(self.clock())
        self._generate(year, month, config, step="save current month")
        return year, month

    def ensure_next_month(self, config: ScheduleConfig) -> tuple[int, int] | None:
        """Generate next month unless the latest stored slot falls in it.

        Only the month of year is compared, so a store whose latest slot is
        in the same month of another year counts as already generated.
        """
        year, month = next_month(*month_of(self.clock()))
        latest_month = self.store.max_scheduled_month()
        if latest_month == month:
            logger.info("Meal slots for %04d-%02d found in store", year, month)
            return None
        self._generate(year, month, config, step="save next month")
        return year, month

    def current_config(self) -> ScheduleConfig | None:
        """Return the stored config, if one exists."""
        if not self.store.config_exists():
            return None
        return self.store.load_config()

    def day_schedule(self, day: date) -> list[MealSlot]:
        """Return the planned meal slots for a calendar day."""
        start = datetime.combine(day, time.min)
        return self.store.list_meal_slots(start, start + timedelta(days=1))

    def _generate(
        self, year: int, month: int, config: ScheduleConfig, step: str
    ) -> None:
        interval = compute_interval(config)
        slots = build_month(year, month, config, interval)
        _check_write(self.store.save_meal_slots(slots), step=step)
        logger.info(
            "Saved %s meal slots for %04d-%02d (interval %s)",
            len(slots),
            year,
            month,
            interval,
        )


def _check_write(result: WriteResult, step: str) -> None:
    if not result.ok:
        raise PersistenceError(step, result.error)
