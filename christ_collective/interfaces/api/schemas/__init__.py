from .auth import Token
from .feed import (
    CampaignCreate,
    CampaignRead,
    ChatCreate,
    ChatRead,
    MinistryCreate,
    MinistryEventCreate,
    MinistryEventRead,
    MinistryPostRead,
    MinistryRead,
    PostCreate,
    PostRead,
)
from .interaction import (
    ContentCreate,
    InteractionOutcomeRead,
    InteractionRead,
    LikeToggleRead,
    UnfollowRead,
)
from .notification import (
    MarkAllReadResponse,
    NotificationRead,
    NotificationTestCreate,
    UnreadCountRead,
)
from .user import UserCreate, UserProfileUpdate, UserRead

__all__ = [
    "CampaignCreate",
    "CampaignRead",
    "ChatCreate",
    "ChatRead",
    "ContentCreate",
    "InteractionOutcomeRead",
    "InteractionRead",
    "LikeToggleRead",
    "MarkAllReadResponse",
    "MinistryCreate",
    "MinistryEventCreate",
    "MinistryEventRead",
    "MinistryPostRead",
    "MinistryRead",
    "NotificationRead",
    "PostCreate",
    "PostRead",
    "NotificationTestCreate",
    "Token",
    "UnfollowRead",
    "UnreadCountRead",
    "UserCreate",
    "UserProfileUpdate",
    "UserRead",
]
