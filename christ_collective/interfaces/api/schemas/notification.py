"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from christ_collective.domain.entities import NotificationType


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    recipient_id: int
    type: NotificationType
    title: str
    message: str
    related_id: int | None = None
    related_type: str | None = None
    is_read: bool
    created_at: datetime
    actor_name: str | None = None
    actor_image: str | None = None

    model_config = ConfigDict(from_attributes=True)


class UnreadCountRead(BaseModel):
    count: int = Field(..., ge=0)


class MarkAllReadResponse(BaseModel):
    updated: int = Field(..., ge=0, description="Number of notifications flipped to read")


class NotificationTestCreate(BaseModel):
    """Payload used to send a test notification to the authenticated user."""

    message: str = Field(..., min_length=1, max_length=500)
    type: Literal["info"] = "info"


__all__ = [
    "MarkAllReadResponse",
    "NotificationRead",
    "NotificationTestCreate",
    "UnreadCountRead",
]
