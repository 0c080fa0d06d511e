"""Supabase repository for the feeding schedule."""

from dataclasses import dataclass
from datetime import datetime, time

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from feeding_schedule.domain.errors import PersistenceError
from feeding_schedule.domain.schedule import MealSlot, ScheduleConfig, WriteResult
from feeding_schedule.services.schedule import ScheduleStore

CONFIG_TABLE = "schedule_config"
MEAL_SLOTS_TABLE = "meal_slots"

_STORE_ERRORS = (APIError, httpx.HTTPError)


@dataclass
class SupabaseScheduleStore(ScheduleStore):
    """Supabase implementation for the schedule store."""

    client: Client

    def config_exists(self) -> bool:
        """Return True when a config row is stored."""
        try:
            response = self.client.table(CONFIG_TABLE).select("id").limit(1).execute()
        except _STORE_ERRORS as exc:
            raise PersistenceError("check schedule config", str(exc)) from exc
        return bool(response.data)

    def load_config(self) -> ScheduleConfig:
        """Return the first stored config row."""
        try:
            response = (
                self.client.table(CONFIG_TABLE)
                .select("meals_per_day, window_start, window_end")
                .order("id", desc=False)
                .limit(1)
                .execute()
            )
        except _STORE_ERRORS as exc:
            raise PersistenceError("load schedule config", str(exc)) from exc
        if not response.data:
            raise PersistenceError("load schedule config", "no config row stored")
        row = response.data[0]
        return ScheduleConfig(
            meals_per_day=int(row["meals_per_day"]),
            window_start=time.fromisoformat(str(row["window_start"])),
            window_end=time.fromisoformat(str(row["window_end"])),
        )

    def save_config(self, config: ScheduleConfig) -> WriteResult:
        """Insert the config row."""
        try:
            response = (
                self.client.table(CONFIG_TABLE)
                .insert(
                    {
                        "meals_per_day": config.meals_per_day,
                        "window_start": config.window_start.isoformat(),
                        "window_end": config.window_end.isoformat(),
                    }
                )
                .execute()
            )
        except _STORE_ERRORS as exc:
            return WriteResult.failure(str(exc))
        if not response.data:
            return WriteResult.failure("Supabase returned no config row")
        return WriteResult.success()

    def any_meal_slot_exists(self) -> bool:
        """Return True when the meal slot table has any row."""
        try:
            response = (
                self.client.table(MEAL_SLOTS_TABLE).select("id").limit(1).execute()
            )
        except _STORE_ERRORS as exc:
            raise PersistenceError("check meal slots", str(exc)) from exc
        return bool(response.data)

    def max_scheduled_month(self) -> int | None:
        """Return the month of year of the latest scheduled meal slot."""
        try:
            response = (
                self.client.table(MEAL_SLOTS_TABLE)
                .select("scheduled_at")
                .order("scheduled_at", desc=True)
                .limit(1)
                .execute()
            )
        except _STORE_ERRORS as exc:
            raise PersistenceError("find latest meal slot", str(exc)) from exc
        if not response.data:
            return None
        return datetime.fromisoformat(str(response.data[0]["scheduled_at"])).month

    def save_meal_slots(self, slots: list[MealSlot]) -> WriteResult:
        """Insert all slots in a single request."""
        if not slots:
            return WriteResult.success()
        payload = [
            {
                "serving_number": slot.serving_number,
                "status": slot.status,
                "scheduled_at": slot.scheduled_at.isoformat(),
            }
            for slot in slots
        ]
        try:
            response = self.client.table(MEAL_SLOTS_TABLE).insert(payload).execute()
        except _STORE_ERRORS as exc:
            return WriteResult.failure(str(exc))
        if not response.data:
            return WriteResult.failure("Supabase returned no meal slot rows")
        return WriteResult.success()

    def list_meal_slots(self, start: datetime, end: datetime) -> list[MealSlot]:
        """Return meal slots scheduled in [start, end)."""
        try:
            response = (
                self.client.table(MEAL_SLOTS_TABLE)
                .select("serving_number, status, scheduled_at")
                .gte("scheduled_at", start.isoformat())
                .lt("scheduled_at", end.isoformat())
                .order("scheduled_at", desc=False)
                .execute()
            )
        except _STORE_ERRORS as exc:
            raise PersistenceError("list meal slots", str(exc)) from exc
        return [_parse_slot(row) for row in response.data or []]


def _parse_slot(row: dict[str, object]) -> MealSlot:
    return MealSlot(
        serving_number=int(row["serving_number"]),
        scheduled_at=datetime.fromisoformat(str(row["scheduled_at"])),
        status=bool(row.get("status", False)),
    )
