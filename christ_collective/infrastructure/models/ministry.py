"""SQLAlchemy models for ministry profiles and events."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from christ_collective.infrastructure.database import Base
from christ_collective.utils import now_in_app_naive_datetime


class MinistryModel(Base):
    """Database representation of a ministry profile."""

    __tablename__ = "ministry"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String(150), nullable=False)
    logo = Column(String(500), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


class MinistryEventModel(Base):
    """Database representation of an event hosted by a ministry."""

    __tablename__ = "ministry_event"

    id = Column(Integer, primary_key=True, index=True)
    ministry_id = Column(
        Integer, ForeignKey("ministry.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(200), nullable=False)
    start_date = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["MinistryModel", "MinistryEventModel"]
