"""Repository implementations for infrastructure layer."""

from .activity_repository import ActivityFilters, ActivityRepository

__all__ = ["ActivityFilters", "ActivityRepository"]
