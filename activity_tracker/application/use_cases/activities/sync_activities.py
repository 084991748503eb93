"""Use case for the bulk upsert sent by offline clients."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy.orm import Session

from activity_tracker.domain.entities import Activity, generate_activity_id
from activity_tracker.infrastructure.repositories import ActivityRepository
from .validators import build_activity, normalize_activity, validate_activity

logger = logging.getLogger(__name__)


def _merge_into_stored(stored: Activity, incoming: Activity) -> Activity:
    """Apply the client's editable values and status flags to ``stored``.

    ``id``, ``type`` and ``created_at`` keep their stored values.
    """

    merged = stored.copy().update(
        {name: getattr(incoming, name) for name in stored.updatable_fields}
    )
    merged.completed = incoming.completed
    merged.cancelled = incoming.cancelled
    merged.completed_date = incoming.completed_date
    normalize_activity(merged)
    validate_activity(merged)
    return merged


def sync_activities(
    session: Session, *, activities: Sequence[Mapping[str, Any]]
) -> Sequence[Activity]:
    """Upsert every activity by id and return the full stored set.

    Known ids take the client's editable fields and status (last writer
    wins) while their type and creation time stay as stored; unknown ids are
    inserted. Every item is validated before anything is written, so a
    malformed item rejects the whole request.
    """

    repository = ActivityRepository(session)
    entities: list[Activity] = []
    for data in activities:
        values = dict(data)
        if not values.get("id"):
            values["id"] = generate_activity_id()
        incoming = build_activity(values)
        stored = repository.get(incoming.id)
        entities.append(incoming if stored is None else _merge_into_stored(stored, incoming))

    inserted, updated = repository.bulk_upsert(entities)
    logger.info("Sync completed: %d new, %d updated activities", inserted, updated)
    return repository.list()


__all__ = ["sync_activities"]
