"""Use case for creating activities."""

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from activity_tracker.domain.entities import Activity, generate_activity_id
from activity_tracker.domain.errors import DuplicateActivityError
from activity_tracker.infrastructure.repositories import ActivityRepository
from .validators import build_activity

logger = logging.getLogger(__name__)


def create_activity(session: Session, *, data: Mapping[str, Any]) -> Activity:
    """Create a new activity, generating its id when the client sent none."""

    values = dict(data)
    if not values.get("id"):
        values["id"] = generate_activity_id()
    # Status is only ever changed through the complete/cancel transitions.
    values.pop("completed", None)
    values.pop("cancelled", None)
    values.pop("completed_date", None)
    values.pop("completedDate", None)

    activity = build_activity(values)

    repository = ActivityRepository(session)
    if repository.exists(activity.id):
        raise DuplicateActivityError(activity.id)

    created = repository.create(activity)
    logger.info("Activity created: %s - %s", created.id, created.title)
    return created
