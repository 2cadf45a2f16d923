"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, String, Text

from christ_collective.infrastructure.database import Base
from christ_collective.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"
    __table_args__ = (
        Index("ix_notification_recipient_unread", "recipient_id", "is_read"),
    )

    id = Column(Integer, primary_key=True, index=True)
    recipient_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    type = Column(String(30), nullable=False)
    title = Column(String(120), nullable=False)
    message = Column(Text, nullable=False)
    related_id = Column(Integer, nullable=True)
    related_type = Column(String(30), nullable=True)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    actor_id = Column(Integer, ForeignKey("user.id", ondelete="SET NULL"), nullable=True)
    actor_name = Column(String(100), nullable=True)
    actor_image = Column(String(500), nullable=True)
    interaction_id = Column(
        Integer, ForeignKey("interaction.id", ondelete="SET NULL"), nullable=True
    )


__all__ = ["NotificationModel"]
