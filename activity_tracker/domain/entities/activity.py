"""Domain entity representing a scheduled activity."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any
from uuid import uuid4

from activity_tracker.domain.errors import InvalidTransitionError
from activity_tracker.utils import now_iso

ACTIVITY_TYPE_WORKSHOP = "workshop"
ACTIVITY_TYPE_MENTORING = "mentoring"
ACTIVITY_TYPE_NETWORKING = "networking"
ACTIVITY_TYPES = (
    ACTIVITY_TYPE_WORKSHOP,
    ACTIVITY_TYPE_MENTORING,
    ACTIVITY_TYPE_NETWORKING,
)

STATUS_UPCOMING = "upcoming"
STATUS_COMPLETED = "completed"
STATUS_CANCELLED = "cancelled"
ACTIVITY_STATUSES = (STATUS_UPCOMING, STATUS_COMPLETED, STATUS_CANCELLED)

NETWORKING_FORMATS = ("mixer", "roundtable", "speed-networking", "panel", "other")
DEFAULT_NETWORKING_FORMAT = "mixer"

TYPE_SPECIFIC_FIELDS: dict[str, tuple[str, ...]] = {
    ACTIVITY_TYPE_WORKSHOP: ("presenter", "materials"),
    ACTIVITY_TYPE_MENTORING: ("mentor", "mentee", "focus"),
    ACTIVITY_TYPE_NETWORKING: ("format", "partners"),
}
ALL_TYPE_SPECIFIC_FIELDS = tuple(
    name for names in TYPE_SPECIFIC_FIELDS.values() for name in names
)

COMMON_UPDATABLE_FIELDS = (
    "title",
    "date",
    "time",
    "description",
    "location",
    "capacity",
)

# Python attribute -> JSON key, for the attributes whose names differ.
_WIRE_NAMES = {"created_at": "createdAt", "completed_date": "completedDate"}
_ATTRIBUTE_NAMES = {wire: attr for attr, wire in _WIRE_NAMES.items()}


def generate_activity_id() -> str:
    """Return a new globally unique activity identifier."""

    return uuid4().hex


@dataclass
class Activity:
    """A workshop, mentoring session or networking event.

    Fields that only make sense for one activity type are ``None`` for the
    other types and are left out of :meth:`to_dict`.
    """

    id: str
    type: str
    title: str
    date: str
    time: str
    description: str = ""
    location: str = ""
    capacity: int | None = None
    completed: bool = False
    cancelled: bool = False
    created_at: str = field(default_factory=now_iso)
    completed_date: str | None = None
    presenter: str | None = None
    materials: str | None = None
    mentor: str | None = None
    mentee: str | None = None
    focus: str | None = None
    format: str | None = None
    partners: str | None = None

    def __post_init__(self) -> None:
        own_fields = TYPE_SPECIFIC_FIELDS.get(self.type, ())
        for name in ALL_TYPE_SPECIFIC_FIELDS:
            if name not in own_fields:
                setattr(self, name, None)
            elif getattr(self, name) is None:
                default = DEFAULT_NETWORKING_FORMAT if name == "format" else ""
                setattr(self, name, default)

    @property
    def status(self) -> str:
        if self.cancelled:
            return STATUS_CANCELLED
        if self.completed:
            return STATUS_COMPLETED
        return STATUS_UPCOMING

    @property
    def type_specific_fields(self) -> tuple[str, ...]:
        return TYPE_SPECIFIC_FIELDS.get(self.type, ())

    @property
    def updatable_fields(self) -> tuple[str, ...]:
        return COMMON_UPDATABLE_FIELDS + self.type_specific_fields

    def equals(self, other: "Activity") -> bool:
        return self.id == other.id

    def complete(self, completed_date: str | None = None) -> "Activity":
        """Mark the activity as completed and stamp ``completed_date``.

        ``completed_date`` defaults to now; callers mirroring a transition the
        server already performed pass the server's timestamp.
        """

        if self.cancelled:
            raise InvalidTransitionError("Cannot complete a cancelled activity")
        if self.completed:
            raise InvalidTransitionError("Activity is already completed")
        self.completed = True
        self.completed_date = completed_date or now_iso()
        return self

    def cancel(self) -> "Activity":
        """Mark the activity as cancelled."""

        if self.completed:
            raise InvalidTransitionError("Cannot cancel a completed activity")
        if self.cancelled:
            raise InvalidTransitionError("Activity is already cancelled")
        self.cancelled = True
        return self

    def update(self, changes: Mapping[str, Any]) -> "Activity":
        """Merge the non-``None`` updatable values of ``changes`` into the entity.

        Identity fields (``id``, ``type``, ``created_at``) and status flags are
        never touched, as are type-specific fields of other activity types.
        """

        for name in self.updatable_fields:
            value = changes.get(name)
            if value is not None:
                setattr(self, name, value)
        return self

    def copy(self) -> "Activity":
        """Return an independent copy of the entity."""

        return replace(self)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON wire representation (camelCase keys)."""

        own_fields = self.type_specific_fields
        payload: dict[str, Any] = {}
        for item in fields(self):
            if item.name in ALL_TYPE_SPECIFIC_FIELDS and item.name not in own_fields:
                continue
            payload[_WIRE_NAMES.get(item.name, item.name)] = getattr(self, item.name)
        return payload

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Activity":
        """Build an entity from its wire representation.

        Unknown keys are ignored; snake_case names are accepted for the
        timestamp fields as well.
        """

        known = {item.name for item in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = _ATTRIBUTE_NAMES.get(key, key)
            if name in known:
                values[name] = value
        if not values.get("created_at"):
            values.pop("created_at", None)
        return cls(**values)


__all__ = [
    "Activity",
    "ACTIVITY_TYPES",
    "ACTIVITY_TYPE_WORKSHOP",
    "ACTIVITY_TYPE_MENTORING",
    "ACTIVITY_TYPE_NETWORKING",
    "ACTIVITY_STATUSES",
    "ALL_TYPE_SPECIFIC_FIELDS",
    "COMMON_UPDATABLE_FIELDS",
    "DEFAULT_NETWORKING_FORMAT",
    "NETWORKING_FORMATS",
    "STATUS_UPCOMING",
    "STATUS_COMPLETED",
    "STATUS_CANCELLED",
    "TYPE_SPECIFIC_FIELDS",
    "generate_activity_id",
]
