"""Persistence layer for activities."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy import asc, desc, false, func, true
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from activity_tracker.domain.entities import (
    ACTIVITY_TYPE_MENTORING,
    STATUS_CANCELLED,
    STATUS_COMPLETED,
    STATUS_UPCOMING,
    Activity,
)
from activity_tracker.infrastructure.models import ActivityModel
from activity_tracker.utils import today_iso

STATUS_PAST_DUE = "past-due"


@dataclass(frozen=True)
class ActivityFilters:
    """Optional criteria accepted when listing activities."""

    type: str | None = None
    status: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    mentor: str | None = None
    location: str | None = None
    capacity: int | None = None


class ActivityRepository:
    """Provide CRUD operations for activities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list(self, filters: ActivityFilters | None = None) -> Sequence[Activity]:
        query = self._apply_filters(self.session.query(ActivityModel), filters)
        query = query.order_by(asc(ActivityModel.date), asc(ActivityModel.time))
        return [self._to_entity(model) for model in query.all()]

    def list_upcoming(self, *, limit: int | None = 10) -> Sequence[Activity]:
        query = (
            self.session.query(ActivityModel)
            .filter(ActivityModel.date >= today_iso())
            .filter(ActivityModel.completed == false())
            .filter(ActivityModel.cancelled == false())
            .order_by(asc(ActivityModel.date), asc(ActivityModel.time))
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_completed(self, *, limit: int | None = 10) -> Sequence[Activity]:
        query = (
            self.session.query(ActivityModel)
            .filter(ActivityModel.completed == true())
            .order_by(desc(ActivityModel.completed_date))
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_mentors(self) -> list[str]:
        query = (
            self.session.query(ActivityModel.mentor)
            .filter(ActivityModel.type == ACTIVITY_TYPE_MENTORING)
            .order_by(asc(ActivityModel.date), asc(ActivityModel.time))
        )
        mentors: list[str] = []
        for (mentor,) in query.all():
            if mentor and mentor not in mentors:
                mentors.append(mentor)
        return mentors

    def get(self, activity_id: str) -> Activity | None:
        model = self.session.get(ActivityModel, activity_id)
        return self._to_entity(model) if model else None

    def exists(self, activity_id: str) -> bool:
        return self.session.get(ActivityModel, activity_id) is not None

    def create(self, activity: Activity) -> Activity:
        model = ActivityModel(id=activity.id)
        self._apply_entity_to_model(model, activity)
        self.session.add(model)
        self._commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, activity: Activity) -> Activity:
        model = self.session.get(ActivityModel, activity.id)
        if not model:
            msg = f"Activity with id {activity.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, activity)
        self.session.add(model)
        self._commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, activity_id: str) -> Activity | None:
        model = self.session.get(ActivityModel, activity_id)
        if not model:
            return None
        entity = self._to_entity(model)
        self.session.delete(model)
        self._commit()
        return entity

    def bulk_upsert(self, activities: Sequence[Activity]) -> tuple[int, int]:
        """Insert unknown ids and overwrite known ones in one transaction.

        Returns the number of inserted and updated activities.
        """

        ids = {activity.id for activity in activities}
        existing: dict[str, ActivityModel] = {}
        if ids:
            query = self.session.query(ActivityModel).filter(ActivityModel.id.in_(ids))
            existing = {model.id: model for model in query.all()}

        inserted = updated = 0
        for activity in activities:
            model = existing.get(activity.id)
            if model is None:
                model = ActivityModel(id=activity.id)
                existing[activity.id] = model
                self.session.add(model)
                inserted += 1
            else:
                updated += 1
            self._apply_entity_to_model(model, activity)

        self._commit()
        return inserted, updated

    def _commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    @staticmethod
    def _apply_filters(
        query: Query, filters: ActivityFilters | None
    ) -> Query:
        if filters is None:
            return query

        if filters.type:
            query = query.filter(ActivityModel.type == filters.type)

        if filters.status:
            today = today_iso()
            if filters.status == STATUS_UPCOMING:
                query = query.filter(
                    ActivityModel.completed == false(),
                    ActivityModel.cancelled == false(),
                    ActivityModel.date >= today,
                )
            elif filters.status == STATUS_COMPLETED:
                query = query.filter(ActivityModel.completed == true())
            elif filters.status == STATUS_CANCELLED:
                query = query.filter(ActivityModel.cancelled == true())
            elif filters.status == STATUS_PAST_DUE:
                query = query.filter(
                    ActivityModel.completed == false(),
                    ActivityModel.cancelled == false(),
                    ActivityModel.date < today,
                )

        if filters.start_date:
            query = query.filter(ActivityModel.date >= filters.start_date)
        if filters.end_date:
            query = query.filter(ActivityModel.date <= filters.end_date)

        if filters.mentor:
            query = query.filter(
                func.lower(ActivityModel.mentor).contains(
                    filters.mentor.lower(), autoescape=True
                )
            )
        if filters.location:
            query = query.filter(
                func.lower(ActivityModel.location).contains(
                    filters.location.lower(), autoescape=True
                )
            )

        if filters.capacity is not None:
            query = query.filter(ActivityModel.capacity >= filters.capacity)

        return query

    @staticmethod
    def _to_entity(model: ActivityModel) -> Activity:
        return Activity(
            id=model.id,
            type=model.type,
            title=model.title,
            date=model.date,
            time=model.time,
            description=model.description or "",
            location=model.location or "",
            capacity=model.capacity,
            completed=bool(model.completed),
            cancelled=bool(model.cancelled),
            created_at=model.created_at,
            completed_date=model.completed_date,
            presenter=model.presenter,
            materials=model.materials,
            mentor=model.mentor,
            mentee=model.mentee,
            focus=model.focus,
            format=model.format,
            partners=model.partners,
        )

    @staticmethod
    def _apply_entity_to_model(model: ActivityModel, activity: Activity) -> None:
        model.type = activity.type
        model.title = activity.title
        model.date = activity.date
        model.time = activity.time
        model.description = activity.description
        model.location = activity.location
        model.capacity = activity.capacity
        model.completed = activity.completed
        model.cancelled = activity.cancelled
        model.created_at = activity.created_at
        model.completed_date = activity.completed_date
        model.presenter = activity.presenter
        model.materials = activity.materials
        model.mentor = activity.mentor
        model.mentee = activity.mentee
        model.focus = activity.focus
        model.format = activity.format
        model.partners = activity.partners


__all__ = ["ActivityFilters", "ActivityRepository", "STATUS_PAST_DUE"]
