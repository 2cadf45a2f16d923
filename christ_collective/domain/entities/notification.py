"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class NotificationType(str, Enum):
    """Every notification kind; mirrors ``ActionType`` plus ``post`` and ``info``."""

    LIKE = "like"
    COMMENT = "comment"
    FOLLOW = "follow"
    MESSAGE = "message"
    RSVP = "rsvp"
    CAMPAIGN_UPDATE = "campaign_update"
    MINISTRY_POST = "ministry_post"
    POST = "post"
    INFO = "info"


@dataclass
class Notification:
    """Information message delivered to a specific user.

    ``actor_name`` and ``actor_image`` are copied from the actor profile when
    the notification is created and are never refreshed afterwards.
    """

    id: int | None
    recipient_id: int
    type: NotificationType
    title: str
    message: str
    related_id: int | None = None
    related_type: str | None = None
    is_read: bool = False
    created_at: datetime | None = None
    actor_id: int | None = None
    actor_name: str | None = None
    actor_image: str | None = None
    interaction_id: int | None = None


__all__ = ["Notification", "NotificationType"]
