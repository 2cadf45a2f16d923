"""Write paths of the entities that originate interactions."""

from .campaigns import create_campaign, post_campaign_update, slugify
from .chats import list_messages, open_chat, send_message
from .follows import (
    follow_ministry,
    follow_user,
    list_follower_ids,
    unfollow_ministry,
    unfollow_user,
)
from .ministries import (
    cancel_rsvp,
    create_ministry,
    create_ministry_event,
    get_ministry,
    publish_ministry_post,
    rsvp_event,
)
from .posts import (
    LikeToggleResult,
    add_comment,
    create_post,
    get_post,
    list_comments,
    toggle_like,
)

__all__ = [
    "LikeToggleResult",
    "add_comment",
    "cancel_rsvp",
    "create_campaign",
    "create_ministry",
    "create_ministry_event",
    "create_post",
    "follow_ministry",
    "follow_user",
    "get_ministry",
    "get_post",
    "list_comments",
    "list_follower_ids",
    "list_messages",
    "open_chat",
    "post_campaign_update",
    "publish_ministry_post",
    "rsvp_event",
    "send_message",
    "slugify",
    "toggle_like",
    "unfollow_ministry",
    "unfollow_user",
]
