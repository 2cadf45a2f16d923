"""Delivery surface consumed by the notification bell and list."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from christ_collective.domain.entities import Notification
from christ_collective.infrastructure.repositories import NotificationRepository

from .read_state import get_owned_notification

logger = logging.getLogger(__name__)


def list_notifications(
    session: Session,
    recipient_id: int,
    *,
    skip: int = 0,
    limit: int | None = 50,
    unread_only: bool = False,
) -> Sequence[Notification]:
    """Return notifications for ``recipient_id``, newest first.

    Pagination is a plain offset so a client may restart from any page.
    """

    if skip < 0:
        raise ValueError("skip must be zero or positive")
    if limit is not None and limit <= 0:
        raise ValueError("limit must be positive")
    return NotificationRepository(session).list_for_recipient(
        recipient_id, skip=skip, limit=limit, unread_only=unread_only
    )


def delete_notification(session: Session, notification_id: int, *, requestor_id: int) -> None:
    """Permanently delete a notification owned by ``requestor_id``."""

    repository = NotificationRepository(session)
    get_owned_notification(repository, notification_id, requestor_id)
    repository.delete(notification_id)
    logger.info("User %s deleted notification %s", requestor_id, notification_id)


__all__ = ["delete_notification", "list_notifications"]
