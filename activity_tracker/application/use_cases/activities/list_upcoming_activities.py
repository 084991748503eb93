"""Use case for listing the next scheduled activities."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from activity_tracker.domain.entities import Activity
from activity_tracker.infrastructure.repositories import ActivityRepository


def list_upcoming_activities(session: Session, *, limit: int = 10) -> Sequence[Activity]:
    """Return activities dated today or later that are neither completed nor cancelled."""

    return ActivityRepository(session).list_upcoming(limit=limit)


__all__ = ["list_upcoming_activities"]
