"""Public helpers for deriving and delivering notifications."""

from .delivery import delete_notification, list_notifications
from .derive import derive_notification, notify_user
from .read_state import (
    count_unread_notifications,
    get_owned_notification,
    mark_all_notifications_read,
    mark_notification_read,
)

__all__ = [
    "count_unread_notifications",
    "delete_notification",
    "derive_notification",
    "get_owned_notification",
    "list_notifications",
    "mark_all_notifications_read",
    "mark_notification_read",
    "notify_user",
]
