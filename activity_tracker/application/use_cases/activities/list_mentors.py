"""Use case for listing the mentors of mentoring sessions."""

from sqlalchemy.orm import Session

from activity_tracker.infrastructure.repositories import ActivityRepository


def list_mentors(session: Session) -> list[str]:
    return ActivityRepository(session).list_mentors()


__all__ = ["list_mentors"]
