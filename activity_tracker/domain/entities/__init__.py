"""Domain entities exposed by the application."""

from .activity import (
    ACTIVITY_STATUSES,
    ACTIVITY_TYPES,
    ACTIVITY_TYPE_MENTORING,
    ACTIVITY_TYPE_NETWORKING,
    ACTIVITY_TYPE_WORKSHOP,
    ALL_TYPE_SPECIFIC_FIELDS,
    COMMON_UPDATABLE_FIELDS,
    DEFAULT_NETWORKING_FORMAT,
    NETWORKING_FORMATS,
    STATUS_CANCELLED,
    STATUS_COMPLETED,
    STATUS_UPCOMING,
    TYPE_SPECIFIC_FIELDS,
    Activity,
    generate_activity_id,
)
from .statistics import ActivityStatistics, compute_statistics

__all__ = [
    "Activity",
    "ActivityStatistics",
    "compute_statistics",
    "generate_activity_id",
    "ACTIVITY_STATUSES",
    "ACTIVITY_TYPES",
    "ACTIVITY_TYPE_MENTORING",
    "ACTIVITY_TYPE_NETWORKING",
    "ACTIVITY_TYPE_WORKSHOP",
    "ALL_TYPE_SPECIFIC_FIELDS",
    "COMMON_UPDATABLE_FIELDS",
    "DEFAULT_NETWORKING_FORMAT",
    "NETWORKING_FORMATS",
    "STATUS_CANCELLED",
    "STATUS_COMPLETED",
    "STATUS_UPCOMING",
    "TYPE_SPECIFIC_FIELDS",
]
