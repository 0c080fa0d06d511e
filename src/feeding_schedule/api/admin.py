"""Admin API endpoints with simple token auth."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from feeding_schedule.api.serializers import report_payload
from feeding_schedule.domain.errors import ConfigurationError, PersistenceError

if TYPE_CHECKING:
    from feeding_schedule.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])
logger = logging.getLogger(__name__)


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.get("/health", dependencies=[Depends(require_admin)])
async def admin_health() -> dict[str, str]:
    """Admin health check endpoint."""
    return {"status": "ok"}


@router.post("/schedule/ensure", dependencies=[Depends(require_admin)])
def ensure_schedule(request: Request) -> dict[str, object]:
    """Re-run the config, current month and next month checks."""
    container: AppContainer = request.app.state.container
    try:
        report = container.schedule_service.initialize()
    except PersistenceError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
        ) from exc
    except ConfigurationError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=str(exc)
        ) from exc
    return report_payload(report)
