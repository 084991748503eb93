"""Use case for updating activities."""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from activity_tracker.domain.entities import Activity
from activity_tracker.domain.errors import ActivityNotFoundError, InvalidTransitionError
from activity_tracker.infrastructure.repositories import ActivityRepository
from .validators import normalize_activity, validate_activity

logger = logging.getLogger(__name__)


def update_activity(
    session: Session,
    *,
    activity_id: str,
    changes: Mapping[str, Any],
) -> Activity:
    """Merge ``changes`` into the stored activity.

    Only the editable fields are applied; identity fields and status flags are
    ignored. Moving a completed activity to another date and completing a
    cancelled activity through an update are rejected.
    """

    repository = ActivityRepository(session)
    current = repository.get(activity_id)
    if current is None:
        raise ActivityNotFoundError(activity_id)

    new_date = changes.get("date")
    if current.completed and new_date and new_date != current.date:
        raise InvalidTransitionError("Cannot change date of completed activity")
    if current.cancelled and changes.get("completed"):
        raise InvalidTransitionError("Cannot complete a cancelled activity")

    updated = normalize_activity(current.copy().update(changes))
    validate_activity(updated)

    saved = repository.update(updated)
    logger.info("Activity updated: %s - %s", saved.id, saved.title)
    return saved
