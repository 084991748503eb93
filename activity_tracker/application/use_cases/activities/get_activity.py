"""Use case for retrieving a single activity."""

from sqlalchemy.orm import Session

from activity_tracker.domain.entities import Activity
from activity_tracker.domain.errors import ActivityNotFoundError
from activity_tracker.infrastructure.repositories import ActivityRepository


def get_activity(session: Session, activity_id: str) -> Activity:
    """Return the activity identified by ``activity_id`` or raise an error."""

    repository = ActivityRepository(session)
    activity = repository.get(activity_id)
    if activity is None:
        raise ActivityNotFoundError(activity_id)
    return activity
