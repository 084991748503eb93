"""Use case for listing activities."""

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from activity_tracker.domain.entities import Activity
from activity_tracker.infrastructure.repositories import ActivityFilters, ActivityRepository

logger = logging.getLogger(__name__)


def list_activities(
    session: Session, *, filters: ActivityFilters | None = None
) -> Sequence[Activity]:
    """Return the activities matching ``filters`` sorted by date and time."""

    activities = ActivityRepository(session).list(filters)
    logger.debug("Retrieved %d activities with filters: %s", len(activities), filters)
    return activities


__all__ = ["list_activities"]
