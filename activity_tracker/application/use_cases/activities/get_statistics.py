"""Use case for aggregate activity statistics."""

from sqlalchemy.orm import Session

from activity_tracker.domain.entities import ActivityStatistics, compute_statistics
from activity_tracker.infrastructure.repositories import ActivityRepository


def get_statistics(
    session: Session,
    *,
    start_date: str | None = None,
    end_date: str | None = None,
) -> ActivityStatistics:
    """Return counts by type and status and the completion rate."""

    activities = ActivityRepository(session).list()
    return compute_statistics(activities, start_date, end_date)


__all__ = ["get_statistics"]
