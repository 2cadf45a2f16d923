"""Schemas for recorded interactions (comments, messages, likes, follows)."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from christ_collective.domain.entities import ActionType, RelatedType


class InteractionRead(BaseModel):
    id: int
    actor_id: int
    target_owner_id: int
    action_type: ActionType
    related_id: int
    related_type: RelatedType
    body: str | None = None
    occurred_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class InteractionOutcomeRead(BaseModel):
    """Result of an action: the interaction and whether someone was notified."""

    interaction: InteractionRead
    created: bool
    notification_id: int | None = None


class ContentCreate(BaseModel):
    """Free-text body for comments, chat messages and campaign updates."""

    content: str = Field(..., min_length=1, max_length=5000)


class LikeToggleRead(BaseModel):
    liked: bool
    likes_count: int = Field(..., ge=0)


class UnfollowRead(BaseModel):
    removed: bool


__all__ = [
    "ContentCreate",
    "InteractionOutcomeRead",
    "InteractionRead",
    "LikeToggleRead",
    "UnfollowRead",
]
