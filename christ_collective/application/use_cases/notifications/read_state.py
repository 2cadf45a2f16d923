"""Read-state transitions and unread counts for notifications."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from christ_collective.domain.entities import Notification
from christ_collective.domain.errors import ForbiddenError, NotFoundError
from christ_collective.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


def get_owned_notification(
    repository: NotificationRepository, notification_id: int, requestor_id: int
) -> Notification:
    """Return the notification if ``requestor_id`` is its recipient."""

    notification = repository.get(notification_id)
    if notification is None:
        raise NotFoundError(f"Notification {notification_id} not found")
    if notification.recipient_id != requestor_id:
        logger.warning(
            "User %s attempted to access notification %s owned by user %s",
            requestor_id,
            notification_id,
            notification.recipient_id,
        )
        raise ForbiddenError(f"Notification {notification_id} does not belong to user {requestor_id}")
    return notification


def mark_notification_read(
    session: Session, notification_id: int, *, requestor_id: int
) -> Notification:
    """Mark a single notification as read; already-read notifications are left as is."""

    repository = NotificationRepository(session)
    notification = get_owned_notification(repository, notification_id, requestor_id)
    if notification.is_read:
        return notification
    repository.mark_as_read(notification_id)
    notification.is_read = True
    return notification


def mark_all_notifications_read(session: Session, recipient_id: int) -> int:
    """Mark every unread notification of ``recipient_id`` as read.

    Returns the number of notifications that changed state.
    """

    affected = NotificationRepository(session).mark_all_as_read(recipient_id)
    logger.info("Marked %s notifications as read for user %s", affected, recipient_id)
    return affected


def count_unread_notifications(session: Session, recipient_id: int) -> int:
    return NotificationRepository(session).count_unread(recipient_id)


__all__ = [
    "count_unread_notifications",
    "get_owned_notification",
    "mark_all_notifications_read",
    "mark_notification_read",
]
