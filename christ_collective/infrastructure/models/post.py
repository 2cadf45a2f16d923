"""SQLAlchemy model for platform posts."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from christ_collective.infrastructure.database import Base
from christ_collective.utils import now_in_app_naive_datetime


class PostModel(Base):
    __tablename__ = "post"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    ministry_id = Column(Integer, ForeignKey("ministry.id", ondelete="CASCADE"), nullable=True, index=True)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["PostModel"]
