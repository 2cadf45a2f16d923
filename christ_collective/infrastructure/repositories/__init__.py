"""Repository implementations for infrastructure layer."""

from .campaign_repository import CampaignRepository
from .chat_repository import ChatRepository
from .interaction_repository import InteractionRepository
from .ministry_repository import MinistryRepository
from .notification_repository import NotificationRepository
from .post_repository import PostRepository
from .user_repository import UserRepository

__all__ = [
    "CampaignRepository",
    "ChatRepository",
    "InteractionRepository",
    "MinistryRepository",
    "NotificationRepository",
    "PostRepository",
    "UserRepository",
]
