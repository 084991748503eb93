"""Liveness endpoint."""

from __future__ import annotations

import time

from fastapi import APIRouter

from activity_tracker.interfaces.api.schemas import HealthRead
from activity_tracker.utils import now_iso

router = APIRouter(tags=["health"])

_STARTED_AT = time.monotonic()


@router.get("/health", response_model=HealthRead)
def read_health() -> HealthRead:
    """Report that the service is up and for how long it has been running."""

    return HealthRead(
        status="OK",
        timestamp=now_iso(),
        uptime=round(time.monotonic() - _STARTED_AT, 3),
    )


__all__ = ["router"]
