"""Offline copy of the activity collection."""

from __future__ import annotations

import json
import logging

from activity_tracker.domain.entities import Activity
from activity_tracker.domain.errors import StorageError

from .collection import ActivityCollection
from .observable import Subscription
from .storage import KeyValueStore

logger = logging.getLogger(__name__)

STORAGE_KEY = "task_management_system_activities"


class LocalCache:
    """Persist the collection under :data:`STORAGE_KEY` and restore it.

    Failures are logged and never propagate: a broken cache must not stop the
    session from working against the collection and the server.
    """

    def __init__(
        self,
        collection: ActivityCollection,
        store: KeyValueStore,
        *,
        key: str = STORAGE_KEY,
    ) -> None:
        self.collection = collection
        self.store = store
        self.key = key
        self._subscription: Subscription | None = None

    def attach(self) -> None:
        """Save automatically after every collection change."""

        if self._subscription is None:
            self._subscription = self.collection.subscribe(self.save)

    def detach(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def save(self) -> bool:
        try:
            payload = json.dumps(
                [activity.to_dict() for activity in self.collection.to_array()]
            )
            self.store.set_item(self.key, payload)
        except (StorageError, TypeError, ValueError) as exc:
            logger.error("Error saving activities to the local cache: %s", exc)
            return False
        return True

    def load(self) -> bool:
        """Replace the collection contents with the cached activities.

        Returns ``False`` when nothing was restored (no record, or a record
        that could not be parsed); the collection is left untouched then.
        """

        try:
            raw = self.store.get_item(self.key)
            if raw is None:
                return False
            records = json.loads(raw)
            if not isinstance(records, list):
                raise StorageError("Cached activities are not a JSON array")
            activities = [Activity.from_dict(record) for record in records]
        except (StorageError, TypeError, ValueError, AttributeError) as exc:
            logger.error("Error loading activities from the local cache: %s", exc)
            return False

        self.collection.clear()
        for activity in activities:
            self.collection.add(activity)
        logger.debug("Restored %d activities from the local cache", len(activities))
        return True


__all__ = ["LocalCache", "STORAGE_KEY"]
