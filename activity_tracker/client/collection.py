"""In-memory working set of activities for one client session."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from activity_tracker.domain.entities import (
    Activity,
    ActivityStatistics,
    compute_statistics,
)

from .observable import Observable, Observer, Subscription

Snapshot = tuple[Activity, ...]


class ActivityCollection:
    """Activities keyed by id, with change notification.

    Every mutating operation that changes membership or an activity notifies
    the subscribed observers once, after the change is applied. Operations
    that target an unknown id are silent no-ops.
    """

    def __init__(self, activities: Iterable[Activity] = ()) -> None:
        self._items: dict[str, Activity] = {}
        self._changes = Observable()
        for activity in activities:
            self._items.setdefault(activity.id, activity)

    def subscribe(self, observer: Observer) -> Subscription:
        return self._changes.subscribe(observer)

    def notify(self) -> None:
        self._changes.notify()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Activity]:
        return iter(list(self._items.values()))

    def __contains__(self, activity_id: object) -> bool:
        return activity_id in self._items

    def add(self, activity: Activity) -> bool:
        """Insert ``activity`` unless its id is already present."""

        if activity.id in self._items:
            return False
        self._items[activity.id] = activity
        self.notify()
        return True

    def update(self, activity_id: str, changes: Mapping[str, Any]) -> Activity | None:
        activity = self._items.get(activity_id)
        if activity is None:
            return None
        activity.update(changes)
        self.notify()
        return activity

    def delete(self, activity_id: str) -> Activity | None:
        activity = self._items.pop(activity_id, None)
        if activity is not None:
            self.notify()
        return activity

    def complete(
        self, activity_id: str, *, completed_date: str | None = None
    ) -> Activity | None:
        """Mark the activity as completed.

        Completing an already completed activity changes nothing and does not
        notify. Completing a cancelled one raises ``InvalidTransitionError``.
        """

        activity = self._items.get(activity_id)
        if activity is None or activity.completed:
            return activity
        activity.complete(completed_date)
        self.notify()
        return activity

    def cancel(self, activity_id: str) -> Activity | None:
        """Mark the activity as cancelled (same rules as :meth:`complete`)."""

        activity = self._items.get(activity_id)
        if activity is None or activity.cancelled:
            return activity
        activity.cancel()
        self.notify()
        return activity

    def find_by_id(self, activity_id: str) -> Activity | None:
        return self._items.get(activity_id)

    def replace_list(self, activities: Iterable[Activity]) -> None:
        """Swap the whole membership for copies of ``activities``."""

        replacement: dict[str, Activity] = {}
        for activity in activities:
            replacement.setdefault(activity.id, activity.copy())
        self._items = replacement
        self.notify()

    def clear(self) -> None:
        self._items.clear()
        self.notify()

    def to_array(self) -> list[Activity]:
        """Return the members sorted by date and time."""

        return sorted(self._items.values(), key=lambda item: (item.date, item.time))

    def snapshot(self) -> Snapshot:
        """Return independent copies of every member."""

        return tuple(activity.copy() for activity in self._items.values())

    def get_stats(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> ActivityStatistics:
        return compute_statistics(self._items.values(), start_date, end_date)


__all__ = ["ActivityCollection", "Snapshot"]
