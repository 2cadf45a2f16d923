"""Domain entities exposed by the application."""

from .campaign import Campaign
from .chat import Chat
from .interaction import (
    ALLOWED_TARGETS,
    BROADCAST_ACTIONS,
    IDEMPOTENT_ACTIONS,
    ActionType,
    Interaction,
    RecordedInteraction,
    RelatedType,
    build_dedupe_key,
)
from .ministry import Ministry, MinistryEvent
from .notification import Notification, NotificationType
from .post import Post
from .user import User

__all__ = [
    "ALLOWED_TARGETS",
    "BROADCAST_ACTIONS",
    "IDEMPOTENT_ACTIONS",
    "ActionType",
    "Campaign",
    "Chat",
    "Interaction",
    "Ministry",
    "MinistryEvent",
    "Notification",
    "NotificationType",
    "Post",
    "RecordedInteraction",
    "RelatedType",
    "User",
    "build_dedupe_key",
]
