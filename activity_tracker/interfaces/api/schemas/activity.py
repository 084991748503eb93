"""Schemas for activity endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _TypeSpecificFields(BaseModel):
    presenter: str | None = Field(default=None, description="Workshop presenter")
    materials: str | None = Field(default=None, description="Workshop materials")
    mentor: str | None = Field(default=None, description="Mentoring session mentor")
    mentee: str | None = Field(default=None, description="Mentoring session mentee")
    focus: str | None = Field(default=None, description="Mentoring session focus")
    format: str | None = Field(default=None, description="Networking event format")
    partners: str | None = Field(default=None, description="Networking event partners")


class ActivityCreate(_TypeSpecificFields):
    """Payload required to create an activity."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: str | None = Field(default=None, description="Client generated identifier")
    type: str = Field(..., description="workshop, mentoring or networking")
    title: str
    date: str = Field(..., description="Calendar date (YYYY-MM-DD)")
    time: str = Field(..., description="Start time (HH:MM, 24h)")
    description: str | None = None
    location: str | None = None
    capacity: int | None = Field(default=None, ge=0)
    created_at: str | None = Field(default=None, alias="createdAt")


class ActivityUpdate(_TypeSpecificFields):
    """Editable fields of an activity; anything else in the body is ignored."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str | None = None
    date: str | None = None
    time: str | None = None
    description: str | None = None
    location: str | None = None
    capacity: int | None = Field(default=None, ge=0)
    completed: bool | None = None


class ActivityRead(_TypeSpecificFields):
    """Activity as returned by the API.

    Only the type-specific fields of the activity's own type are set, so
    routes serialize with ``response_model_exclude_unset``.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    type: str
    title: str
    date: str
    time: str
    description: str
    location: str
    capacity: int | None
    completed: bool
    cancelled: bool
    created_at: str = Field(..., alias="createdAt")
    completed_date: str | None = Field(..., alias="completedDate")


class ActivityStatisticsRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    by_type: dict[str, int] = Field(..., alias="byType")
    by_status: dict[str, int] = Field(..., alias="byStatus")
    completion_rate: float = Field(..., alias="completionRate")


class MessageResponse(BaseModel):
    message: str


class HealthRead(BaseModel):
    status: str
    timestamp: str
    uptime: float = Field(..., description="Seconds since the application started")


__all__ = [
    "ActivityCreate",
    "ActivityRead",
    "ActivityStatisticsRead",
    "ActivityUpdate",
    "HealthRead",
    "MessageResponse",
]
