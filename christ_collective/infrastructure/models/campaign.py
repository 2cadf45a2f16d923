"""SQLAlchemy model for donation campaigns."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String

from christ_collective.infrastructure.database import Base
from christ_collective.utils import now_in_app_naive_datetime


class CampaignModel(Base):
    __tablename__ = "campaign"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(200), nullable=False)
    slug = Column(String(220), nullable=False, unique=True, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["CampaignModel"]
