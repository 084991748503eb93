"""Routes to manage activities."""

from __future__ import annotations

import logging
from typing import Any, NoReturn

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from activity_tracker.application.use_cases.activities import (
    cancel_activity as cancel_activity_uc,
    complete_activity as complete_activity_uc,
    create_activity as create_activity_uc,
    delete_activity as delete_activity_uc,
    get_activity as get_activity_uc,
    get_statistics as get_statistics_uc,
    list_activities as list_activities_uc,
    list_mentors as list_mentors_uc,
    list_recent_activities as list_recent_activities_uc,
    list_upcoming_activities as list_upcoming_activities_uc,
    sync_activities as sync_activities_uc,
    update_activity as update_activity_uc,
)
from activity_tracker.domain.entities import Activity
from activity_tracker.domain.errors import ActivityError, ActivityNotFoundError
from activity_tracker.infrastructure.database import get_db
from activity_tracker.infrastructure.repositories import ActivityFilters
from activity_tracker.interfaces.api.schemas import (
    ActivityCreate,
    ActivityRead,
    ActivityStatisticsRead,
    ActivityUpdate,
    MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["activities"])


def _to_read_model(activity: Activity) -> ActivityRead:
    return ActivityRead.model_validate(activity.to_dict())


def _raise_http_error(exc: ActivityError) -> NoReturn:
    status_code = status.HTTP_400_BAD_REQUEST
    if isinstance(exc, ActivityNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    raise HTTPException(status_code=status_code, detail=str(exc)) from exc


@router.get(
    "/activities",
    response_model=list[ActivityRead],
    response_model_exclude_unset=True,
)
def list_activities(
    activity_type: str | None = Query(None, alias="type"),
    activity_status: str | None = Query(
        None,
        alias="status",
        description="upcoming, completed, cancelled or past-due",
    ),
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    mentor: str | None = Query(None, description="Case-insensitive mentor search"),
    location: str | None = Query(None, description="Case-insensitive location search"),
    capacity: int | None = Query(None, ge=0, description="Minimum capacity"),
    db: Session = Depends(get_db),
) -> list[ActivityRead]:
    """Return every activity matching the filters, sorted by date and time."""

    filters = ActivityFilters(
        type=activity_type,
        status=activity_status,
        start_date=start_date,
        end_date=end_date,
        mentor=mentor,
        location=location,
        capacity=capacity,
    )
    activities = list_activities_uc(db, filters=filters)
    return [_to_read_model(activity) for activity in activities]


@router.get(
    "/activities/upcoming",
    response_model=list[ActivityRead],
    response_model_exclude_unset=True,
)
def list_upcoming_activities(
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
) -> list[ActivityRead]:
    """Return the next scheduled activities."""

    activities = list_upcoming_activities_uc(db, limit=limit)
    return [_to_read_model(activity) for activity in activities]


@router.get(
    "/activities/recent",
    response_model=list[ActivityRead],
    response_model_exclude_unset=True,
)
def list_recent_activities(
    limit: int = Query(10, ge=1, le=100),
    db: Session = Depends(get_db),
) -> list[ActivityRead]:
    """Return the most recently completed activities."""

    activities = list_recent_activities_uc(db, limit=limit)
    return [_to_read_model(activity) for activity in activities]


@router.post(
    "/activities/sync",
    response_model=list[ActivityRead],
    response_model_exclude_unset=True,
)
def sync_activities(
    payload: Any = Body(...),
    db: Session = Depends(get_db),
) -> list[ActivityRead]:
    """Upsert the client's activities and return the resulting server set."""

    if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
        logger.warning("Rejected sync body of type %s", type(payload).__name__)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Expected an array of activities",
        )
    try:
        activities = sync_activities_uc(db, activities=payload)
    except ActivityError as exc:
        _raise_http_error(exc)
    return [_to_read_model(activity) for activity in activities]


@router.get(
    "/activities/{activity_id}",
    response_model=ActivityRead,
    response_model_exclude_unset=True,
)
def read_activity(activity_id: str, db: Session = Depends(get_db)) -> ActivityRead:
    """Return the activity identified by ``activity_id``."""

    try:
        activity = get_activity_uc(db, activity_id)
    except ActivityError as exc:
        _raise_http_error(exc)
    return _to_read_model(activity)


@router.post(
    "/activities",
    response_model=ActivityRead,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def register_activity(
    activity_in: ActivityCreate,
    db: Session = Depends(get_db),
) -> ActivityRead:
    """Create a new activity."""

    try:
        activity = create_activity_uc(db, data=activity_in.model_dump(exclude_none=True))
    except ActivityError as exc:
        _raise_http_error(exc)
    return _to_read_model(activity)


@router.put(
    "/activities/{activity_id}",
    response_model=ActivityRead,
    response_model_exclude_unset=True,
)
def update_activity(
    activity_id: str,
    activity_in: ActivityUpdate,
    db: Session = Depends(get_db),
) -> ActivityRead:
    """Update the editable fields of an activity."""

    try:
        activity = update_activity_uc(
            db,
            activity_id=activity_id,
            changes=activity_in.model_dump(exclude_unset=True),
        )
    except ActivityError as exc:
        _raise_http_error(exc)
    return _to_read_model(activity)


@router.delete("/activities/{activity_id}", response_model=MessageResponse)
def delete_activity(activity_id: str, db: Session = Depends(get_db)) -> MessageResponse:
    """Delete an activity."""

    try:
        delete_activity_uc(db, activity_id)
    except ActivityError as exc:
        _raise_http_error(exc)
    return MessageResponse(message="Activity deleted successfully")


@router.post(
    "/activities/{activity_id}/complete",
    response_model=ActivityRead,
    response_model_exclude_unset=True,
)
def complete_activity(activity_id: str, db: Session = Depends(get_db)) -> ActivityRead:
    """Mark an activity as completed."""

    try:
        activity = complete_activity_uc(db, activity_id)
    except ActivityError as exc:
        _raise_http_error(exc)
    return _to_read_model(activity)


@router.post(
    "/activities/{activity_id}/cancel",
    response_model=ActivityRead,
    response_model_exclude_unset=True,
)
def cancel_activity(activity_id: str, db: Session = Depends(get_db)) -> ActivityRead:
    """Mark an activity as cancelled."""

    try:
        activity = cancel_activity_uc(db, activity_id)
    except ActivityError as exc:
        _raise_http_error(exc)
    return _to_read_model(activity)


@router.get("/mentors", response_model=list[str])
def list_mentors(db: Session = Depends(get_db)) -> list[str]:
    """Return the distinct mentors of the mentoring sessions."""

    return list_mentors_uc(db)


@router.get("/statistics", response_model=ActivityStatisticsRead)
def read_statistics(
    start_date: str | None = Query(None, alias="startDate"),
    end_date: str | None = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
) -> ActivityStatisticsRead:
    """Return activity counts by type and status and the completion rate."""

    stats = get_statistics_uc(db, start_date=start_date, end_date=end_date)
    return ActivityStatisticsRead.model_validate(stats.to_dict())


__all__ = ["router"]
