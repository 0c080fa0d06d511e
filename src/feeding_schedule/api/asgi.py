"""ASGI entrypoint for the feeding schedule API."""

from feeding_schedule.api.app import create_app
from feeding_schedule.containers import build_container

app = create_app(build_container())
