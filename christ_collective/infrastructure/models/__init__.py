"""ORM models used by the application infrastructure."""

from .campaign import CampaignModel
from .chat import ChatModel
from .interaction import InteractionModel
from .ministry import MinistryEventModel, MinistryModel
from .notification import NotificationModel
from .post import PostModel
from .user import UserModel

__all__ = [
    "CampaignModel",
    "ChatModel",
    "InteractionModel",
    "MinistryEventModel",
    "MinistryModel",
    "NotificationModel",
    "PostModel",
    "UserModel",
]
