"""Use case for completing activities."""

import logging

from sqlalchemy.orm import Session

from activity_tracker.domain.entities import Activity
from activity_tracker.domain.errors import ActivityNotFoundError
from activity_tracker.infrastructure.repositories import ActivityRepository

logger = logging.getLogger(__name__)


def complete_activity(session: Session, activity_id: str) -> Activity:
    """Mark the activity as completed.

    Raises ``InvalidTransitionError`` when it is cancelled or already
    completed.
    """

    repository = ActivityRepository(session)
    activity = repository.get(activity_id)
    if activity is None:
        raise ActivityNotFoundError(activity_id)

    activity.complete()
    saved = repository.update(activity)
    logger.info("Activity completed: %s - %s", saved.id, saved.title)
    return saved
