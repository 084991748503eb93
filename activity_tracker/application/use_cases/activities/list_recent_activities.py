"""Use case for listing recently completed activities."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from activity_tracker.domain.entities import Activity
from activity_tracker.infrastructure.repositories import ActivityRepository


def list_recent_activities(session: Session, *, limit: int = 10) -> Sequence[Activity]:
    """Return completed activities, most recently completed first."""

    return ActivityRepository(session).list_completed(limit=limit)


__all__ = ["list_recent_activities"]
