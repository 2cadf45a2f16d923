"""Title and message templates for every notification type."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .entities import NotificationType
from .errors import UnknownNotificationTypeError


@dataclass(frozen=True)
class NotificationTemplate:
    """Pair of ``str.format`` patterns rendered with ``actor`` and ``target``."""

    title: str
    message: str

    def render(self, **context: str) -> tuple[str, str]:
        return self.title.format(**context), self.message.format(**context)


NOTIFICATION_TEMPLATES: Mapping[NotificationType, NotificationTemplate] = MappingProxyType(
    {
        NotificationType.LIKE: NotificationTemplate(
            title="New like",
            message="{actor} liked your post {target}",
        ),
        NotificationType.COMMENT: NotificationTemplate(
            title="New comment",
            message="{actor} commented on your post {target}",
        ),
        NotificationType.FOLLOW: NotificationTemplate(
            title="New follower",
            message="{actor} started following {target}",
        ),
        NotificationType.MESSAGE: NotificationTemplate(
            title="New message",
            message="{actor} sent you a message",
        ),
        NotificationType.RSVP: NotificationTemplate(
            title="New RSVP",
            message="{actor} is attending {target}",
        ),
        NotificationType.CAMPAIGN_UPDATE: NotificationTemplate(
            title="Campaign update",
            message="{actor} posted an update on your campaign {target}",
        ),
        NotificationType.MINISTRY_POST: NotificationTemplate(
            title="New ministry post",
            message="{actor} shared a new ministry post: {target}",
        ),
        NotificationType.POST: NotificationTemplate(
            title="New post",
            message="{actor} shared a new post: {target}",
        ),
        NotificationType.INFO: NotificationTemplate(
            title="Notification",
            message="{target}",
        ),
    }
)


def get_template(notification_type: NotificationType | str) -> NotificationTemplate:
    """Return the template registered for ``notification_type``.

    Raises :class:`UnknownNotificationTypeError` when the value is not a known
    type or has no registered template.
    """

    try:
        key = NotificationType(notification_type)
    except ValueError as exc:
        raise UnknownNotificationTypeError(notification_type) from exc
    template = NOTIFICATION_TEMPLATES.get(key)
    if template is None:
        raise UnknownNotificationTypeError(key)
    return template


def render_notification(
    notification_type: NotificationType | str, *, actor: str, target: str
) -> tuple[str, str]:
    """Return the rendered ``(title, message)`` pair for ``notification_type``."""

    return get_template(notification_type).render(actor=actor, target=target)


__all__ = [
    "NOTIFICATION_TEMPLATES",
    "NotificationTemplate",
    "get_template",
    "render_notification",
]
