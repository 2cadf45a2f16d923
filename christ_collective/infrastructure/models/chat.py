"""SQLAlchemy model for direct chats."""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, UniqueConstraint

from christ_collective.infrastructure.database import Base
from christ_collective.utils import now_in_app_naive_datetime


class ChatModel(Base):
    """Two-party conversation; participants are stored with ``user_a_id < user_b_id``."""

    __tablename__ = "chat"
    __table_args__ = (
        UniqueConstraint("user_a_id", "user_b_id", name="uq_chat_participants"),
        CheckConstraint("user_a_id < user_b_id", name="ck_chat_participant_order"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_a_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    user_b_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["ChatModel"]
