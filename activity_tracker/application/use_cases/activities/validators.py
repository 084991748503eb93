"""Validation helpers for activity use cases."""

import re
from collections.abc import Mapping
from dataclasses import fields
from typing import Any

from activity_tracker.domain.entities import (
    ACTIVITY_TYPES,
    ACTIVITY_TYPE_NETWORKING,
    NETWORKING_FORMATS,
    Activity,
)
from activity_tracker.domain.errors import ActivityValidationError
from activity_tracker.utils import is_iso_date, now_iso

TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")

_UNTRIMMED_FIELDS = {"id", "type", "date", "time", "created_at", "completed_date", "format"}


def build_activity(values: Mapping[str, Any]) -> Activity:
    """Return a normalized, validated activity built from request ``values``."""

    try:
        activity = Activity.from_dict(values)
    except TypeError as exc:
        raise ActivityValidationError("Type, title, date and time are required") from exc
    normalize_activity(activity)
    validate_activity(activity)
    return activity


def normalize_activity(activity: Activity) -> Activity:
    """Strip the free-text fields and align ``completed_date`` with ``completed``.

    A completed activity without a completion date is stamped with the current
    time; the date is dropped from activities that are not completed.
    """

    for item in fields(activity):
        if item.name in _UNTRIMMED_FIELDS:
            continue
        value = getattr(activity, item.name)
        if isinstance(value, str):
            setattr(activity, item.name, value.strip())
    if activity.completed and not activity.completed_date:
        activity.completed_date = now_iso()
    elif not activity.completed:
        activity.completed_date = None
    return activity


def validate_activity(activity: Activity) -> None:
    """Raise :class:`ActivityValidationError` when ``activity`` is malformed."""

    if not isinstance(activity.id, str) or not activity.id.strip():
        raise ActivityValidationError("Activity id is required")
    if activity.type not in ACTIVITY_TYPES:
        raise ActivityValidationError("Invalid activity type")
    if not isinstance(activity.title, str) or not activity.title.strip():
        raise ActivityValidationError("Title is required")
    if not isinstance(activity.date, str) or not is_iso_date(activity.date):
        raise ActivityValidationError("Valid date is required")
    if not isinstance(activity.time, str) or not TIME_PATTERN.match(activity.time):
        raise ActivityValidationError("Valid time format required (HH:MM)")
    capacity = activity.capacity
    if capacity is not None and (
        isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0
    ):
        raise ActivityValidationError("Capacity must be a non-negative number")
    if activity.completed and activity.cancelled:
        raise ActivityValidationError("An activity cannot be both completed and cancelled")
    if (
        activity.type == ACTIVITY_TYPE_NETWORKING
        and activity.format not in NETWORKING_FORMATS
    ):
        raise ActivityValidationError("Invalid networking format")


__all__ = ["TIME_PATTERN", "build_activity", "normalize_activity", "validate_activity"]
