"""Aggregate counters computed over a set of activities."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .activity import (
    ACTIVITY_STATUSES,
    ACTIVITY_TYPES,
    STATUS_CANCELLED,
    STATUS_COMPLETED,
    Activity,
)


@dataclass
class ActivityStatistics:
    """Counts by type and status plus the completion rate in percent."""

    total: int = 0
    by_type: dict[str, int] = field(
        default_factory=lambda: {name: 0 for name in ACTIVITY_TYPES}
    )
    by_status: dict[str, int] = field(
        default_factory=lambda: {name: 0 for name in ACTIVITY_STATUSES}
    )
    completion_rate: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "byType": dict(self.by_type),
            "byStatus": dict(self.by_status),
            "completionRate": self.completion_rate,
        }


def compute_statistics(
    activities: Iterable[Activity],
    start_date: str | None = None,
    end_date: str | None = None,
) -> ActivityStatistics:
    """Return statistics for ``activities``.

    When both ``start_date`` and ``end_date`` are given only activities whose
    ``date`` falls inside the inclusive range are counted. Dates are compared
    as strings, so both bounds must be ISO ``YYYY-MM-DD`` values.
    """

    selected = list(activities)
    if start_date and end_date:
        selected = [item for item in selected if start_date <= item.date <= end_date]

    stats = ActivityStatistics(total=len(selected))
    completable = 0
    for activity in selected:
        stats.by_type[activity.type] = stats.by_type.get(activity.type, 0) + 1
        stats.by_status[activity.status] += 1
        if activity.status != STATUS_CANCELLED:
            completable += 1

    completed = stats.by_status[STATUS_COMPLETED]
    stats.completion_rate = (completed / completable) * 100 if completable else 0
    return stats


__all__ = ["ActivityStatistics", "compute_statistics"]
