"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date

from fastapi import FastAPI, HTTPException, Request, status

from feeding_schedule.api.admin import router as admin_router
from feeding_schedule.api.serializers import config_payload, slot_payload
from feeding_schedule.app_logging import configure_logging
from feeding_schedule.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        try:
            report = state_container.schedule_service.initialize()
        except Exception:
            logger.exception("Feeding schedule initialization failed")
            raise
        logger.info("Feeding schedule ready: %s", report.summary())
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/schedule/config")
    def schedule_config(request: Request) -> dict[str, object]:
        """Return the stored feeding parameters."""
        state_container: AppContainer = request.app.state.container
        config = state_container.schedule_service.current_config()
        if config is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return config_payload(config)

    @app.get("/schedule/days/{day}")
    def day_schedule(day: date, request: Request) -> dict[str, object]:
        """Return the planned meals of a calendar day."""
        state_container: AppContainer = request.app.state.container
        slots = state_container.schedule_service.day_schedule(day)
        return {
            "day": day.isoformat(),
            "meals": [slot_payload(slot) for slot in slots],
        }

    return app
