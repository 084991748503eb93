"""Errors raised by the activity domain, its services and the sync client."""

from __future__ import annotations


class ActivityError(ValueError):
    """Base class for every activity related failure."""


class ActivityValidationError(ActivityError):
    """A required field is missing or malformed."""


class ActivityNotFoundError(ActivityError):
    """No activity exists with the requested identifier."""

    def __init__(self, activity_id: str) -> None:
        super().__init__("Activity not found")
        self.activity_id = activity_id


class InvalidTransitionError(ActivityError):
    """The requested status change is not allowed from the current state."""


class DuplicateActivityError(ActivityError):
    """An activity with the same identifier already exists."""

    def __init__(self, activity_id: str) -> None:
        super().__init__("Activity with this ID already exists")
        self.activity_id = activity_id


class TransportError(ActivityError):
    """The backend could not be reached or answered with an error status."""

    def __init__(self, reason: str, *, status_code: int | None = None) -> None:
        message = reason if status_code is None else f"HTTP {status_code}: {reason}"
        super().__init__(message)
        self.reason = reason
        self.status_code = status_code


class StorageError(ActivityError):
    """The local cache could not be read or written."""


__all__ = [
    "ActivityError",
    "ActivityValidationError",
    "ActivityNotFoundError",
    "InvalidTransitionError",
    "DuplicateActivityError",
    "TransportError",
    "StorageError",
]
