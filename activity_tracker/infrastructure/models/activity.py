"""SQLAlchemy model for activities."""

from sqlalchemy import Boolean, Column, Index, Integer, String, Text
from sqlalchemy.sql import expression

from activity_tracker.infrastructure.database import Base


class ActivityModel(Base):
    """Database representation of a scheduled activity."""

    __tablename__ = "activity"
    __table_args__ = (
        Index("ix_activity_type_date", "type", "date"),
        Index("ix_activity_status", "completed", "cancelled"),
    )

    id = Column(String(64), primary_key=True)
    type = Column(String(20), nullable=False)
    title = Column(String(255), nullable=False)
    date = Column(String(10), nullable=False, index=True)
    time = Column(String(5), nullable=False)
    description = Column(Text, nullable=False, default="")
    location = Column(String(255), nullable=False, default="")
    capacity = Column(Integer, nullable=True)
    completed = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    cancelled = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    created_at = Column(String(40), nullable=False)
    completed_date = Column(String(40), nullable=True)

    presenter = Column(String(255), nullable=True)
    materials = Column(Text, nullable=True)

    mentor = Column(String(255), nullable=True)
    mentee = Column(String(255), nullable=True)
    focus = Column(Text, nullable=True)

    format = Column(String(32), nullable=True)
    partners = Column(Text, nullable=True)


__all__ = ["ActivityModel"]
