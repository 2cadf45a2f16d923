"""Endpoints backing the notification bell and notification list."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from christ_collective.application.use_cases.notifications import (
    count_unread_notifications,
    delete_notification,
    list_notifications as list_notifications_uc,
    mark_all_notifications_read,
    mark_notification_read,
    notify_user,
)
from christ_collective.config import get_settings
from christ_collective.domain.entities import NotificationType, User
from christ_collective.domain.errors import LedgerError
from christ_collective.infrastructure.database import get_db
from christ_collective.interfaces.api.dependencies import get_current_active_user
from christ_collective.interfaces.api.routes_helpers import (
    NOTIFICATION_NOT_AVAILABLE,
    http_error_from,
)
from christ_collective.interfaces.api.schemas import (
    MarkAllReadResponse,
    NotificationRead,
    NotificationTestCreate,
    UnreadCountRead,
)

from .serializers import notification_to_schema

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1),
    unread_only: bool = Query(False, description="Only return unread notifications"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> list[NotificationRead]:
    """Return the authenticated user's notifications, newest first."""

    settings = get_settings()
    page_size = min(
        limit or settings.notifications_page_size, settings.notifications_max_page_size
    )
    notifications = list_notifications_uc(
        db, current_user.id, skip=skip, limit=page_size, unread_only=unread_only
    )
    return [notification_to_schema(notification) for notification in notifications]


@router.get("/unread-count", response_model=UnreadCountRead)
def unread_count(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> UnreadCountRead:
    """Polled by the bell icon badge."""

    return UnreadCountRead(count=count_unread_notifications(db, current_user.id))


@router.patch("/mark-all-read", response_model=MarkAllReadResponse)
def mark_all_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> MarkAllReadResponse:
    return MarkAllReadResponse(updated=mark_all_notifications_read(db, current_user.id))


@router.patch("/{notification_id}/read", response_model=NotificationRead)
def mark_read(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationRead:
    try:
        notification = mark_notification_read(
            db, notification_id, requestor_id=current_user.id
        )
    except LedgerError as exc:
        raise http_error_from(exc, detail=NOTIFICATION_NOT_AVAILABLE) from exc
    return notification_to_schema(notification)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_notification(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> Response:
    try:
        delete_notification(db, notification_id, requestor_id=current_user.id)
    except LedgerError as exc:
        raise http_error_from(exc, detail=NOTIFICATION_NOT_AVAILABLE) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/test", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def create_test_notification(
    payload: NotificationTestCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationRead:
    """Send an ``info`` notification to yourself, e.g. to check the bell animation."""

    notification = notify_user(
        db,
        recipient_id=current_user.id,
        notification_type=NotificationType(payload.type),
        target=payload.message,
    )
    logger.info("Created test notification %s for user %s", notification.id, current_user.id)
    return notification_to_schema(notification)
