"""Use case for deleting activities."""

import logging

from sqlalchemy.orm import Session

from activity_tracker.domain.entities import Activity
from activity_tracker.domain.errors import ActivityNotFoundError
from activity_tracker.infrastructure.repositories import ActivityRepository

logger = logging.getLogger(__name__)


def delete_activity(session: Session, activity_id: str) -> Activity:
    """Delete the specified activity and return what was removed."""

    deleted = ActivityRepository(session).delete(activity_id)
    if deleted is None:
        raise ActivityNotFoundError(activity_id)
    logger.info("Activity deleted: %s - %s", deleted.id, deleted.title)
    return deleted
