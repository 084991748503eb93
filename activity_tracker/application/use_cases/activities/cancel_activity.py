"""Use case for cancelling activities."""

import logging

from sqlalchemy.orm import Session

from activity_tracker.domain.entities import Activity
from activity_tracker.domain.errors import ActivityNotFoundError
from activity_tracker.infrastructure.repositories import ActivityRepository

logger = logging.getLogger(__name__)


def cancel_activity(session: Session, activity_id: str) -> Activity:
    """Mark the activity as cancelled unless it is completed or already cancelled."""

    repository = ActivityRepository(session)
    activity = repository.get(activity_id)
    if activity is None:
        raise ActivityNotFoundError(activity_id)

    activity.cancel()
    saved = repository.update(activity)
    logger.info("Activity cancelled: %s - %s", saved.id, saved.title)
    return saved
