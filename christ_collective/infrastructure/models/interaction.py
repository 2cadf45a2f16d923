"""SQLAlchemy model for recorded social interactions."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text

from christ_collective.infrastructure.database import Base
from christ_collective.utils import now_in_app_naive_datetime


class InteractionModel(Base):
    """Ledger row for likes, follows, comments, messages and other actions.

    ``dedupe_key`` is only populated for idempotent actions; NULL values never
    collide, so the unique index serializes duplicates of those actions alone.
    """

    __tablename__ = "interaction"
    __table_args__ = (
        Index("ix_interaction_related", "related_type", "related_id", "action_type"),
    )

    id = Column(Integer, primary_key=True, index=True)
    actor_id = Column(Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True)
    target_owner_id = Column(
        Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    action_type = Column(String(30), nullable=False)
    related_type = Column(String(30), nullable=False)
    related_id = Column(Integer, nullable=False)
    body = Column(Text, nullable=True)
    dedupe_key = Column(String(120), nullable=True, unique=True)
    occurred_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["InteractionModel"]
