"""Tests for the HTTP API."""

from datetime import time

import pytest
from fastapi.testclient import TestClient

from feeding_schedule.api.app import create_app
from feeding_schedule.domain.errors import PersistenceError
from feeding_schedule.domain.schedule import ScheduleConfig


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_startup_initializes_schedule(container, schedule_store) -> None:
    with TestClient(create_app(container)) as client:
        response = client.get("/schedule/days/2026-10-01")

    assert response.status_code == 200
    data = response.json()
    assert data["day"] == "2026-10-01"
    assert [meal["scheduled_at"][-8:-3] for meal in data["meals"]] == [
        "07:30",
        "10:05",
        "12:40",
        "15:15",
        "17:50",
        "20:25",
        "23:00",
    ]
    assert data["meals"][0] == {
        "serving_number": 1,
        "status": False,
        "scheduled_at": "2026-10-01T07:30:00",
    }
    assert len(schedule_store.slot_batches) == 2


def test_startup_failure_propagates(container, schedule_store) -> None:
    schedule_store.fail_reads = True

    with pytest.raises(PersistenceError):
        with TestClient(create_app(container)):
            pass


def test_schedule_config_endpoint(container, schedule_store) -> None:
    client = TestClient(create_app(container))

    missing = client.get("/schedule/config")
    schedule_store.config = ScheduleConfig(
        meals_per_day=4, window_start=time(6, 0), window_end=time(18, 5)
    )
    found = client.get("/schedule/config")

    assert missing.status_code == 404
    assert found.status_code == 200
    assert found.json() == {
        "meals_per_day": 4,
        "window_start": "06:00",
        "window_end": "18:05",
    }


def test_day_without_slots_is_empty(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/schedule/days/2031-05-04")

    assert response.status_code == 200
    assert response.json() == {"day": "2031-05-04", "meals": []}
