"""Shared test fixtures."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

import pytest

from feeding_schedule.config import Settings
from feeding_schedule.containers import AppContainer
from feeding_schedule.domain.errors import PersistenceError
from feeding_schedule.domain.schedule import (
    MealSlot,
    ScheduleConfig,
    WriteResult,
)
from feeding_schedule.services.schedule import ScheduleService, ScheduleStore


@dataclass
class InMemoryScheduleStore(ScheduleStore):
    """In-memory schedule store for tests."""

    config: ScheduleConfig | None = None
    slots: list[MealSlot] = field(default_factory=list)
    slot_batches: list[list[MealSlot]] = field(default_factory=list)
    config_writes: int = 0
    fail_config_write: bool = False
    fail_slot_write_at: int | None = None
    fail_reads: bool = False

    def config_exists(self) -> bool:
        self._check_read("check schedule config")
        return self.config is not None

    def load_config(self) -> ScheduleConfig:
        self._check_read("load schedule config")
        assert self.config is not None
        return self.config

    def save_config(self, config: ScheduleConfig) -> WriteResult:
        if self.fail_config_write:
            return WriteResult.failure("config insert rejected")
        self.config = config
        self.config_writes += 1
        return WriteResult.success()

    def any_meal_slot_exists(self) -> bool:
        self._check_read("check meal slots")
        return bool(self.slots)

    def max_scheduled_month(self) -> int | None:
        self._check_read("find latest meal slot")
        if not self.slots:
            return None
        return max(slot.scheduled_at for slot in self.slots).month

    def save_meal_slots(self, slots: list[MealSlot]) -> WriteResult:
        if self.fail_slot_write_at == len(self.slot_batches):
            return WriteResult.failure("meal slot insert rejected")
        self.slot_batches.append(list(slots))
        self.slots.extend(slots)
        return WriteResult.success()

    def list_meal_slots(self, start: datetime, end: datetime) -> list[MealSlot]:
        self._check_read("list meal slots")
        return sorted(
            (slot for slot in self.slots if start <= slot.scheduled_at < end),
            key=lambda slot: slot.scheduled_at,
        )

    def _check_read(self, step: str) -> None:
        if self.fail_reads:
            raise PersistenceError(step, "connection refused")


def fixed_clock(moment: datetime) -> Callable[[], datetime]:
    """Return a clock that always reports the given moment."""
    return lambda: moment


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        admin_token="admin-token",
    )


@pytest.fixture
def schedule_store() -> InMemoryScheduleStore:
    return InMemoryScheduleStore()


@pytest.fixture
def container(
    settings: Settings, schedule_store: InMemoryScheduleStore
) -> AppContainer:
    schedule_service = ScheduleService(
        store=schedule_store,
        clock=fixed_clock(datetime(2026, 10, 18, 9, 0, tzinfo=UTC)),
    )
    return AppContainer(
        settings=settings,
        schedule_store=schedule_store,
        schedule_service=schedule_service,
    )
