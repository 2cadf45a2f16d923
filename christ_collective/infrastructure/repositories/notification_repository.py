"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from christ_collective.domain.entities import Notification, NotificationType
from christ_collective.infrastructure.models import NotificationModel
from christ_collective.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class NotificationRepository:
    """Provide CRUD operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def list_for_recipient(
        self,
        recipient_id: int,
        *,
        skip: int = 0,
        limit: int | None = 50,
        unread_only: bool = False,
    ) -> Sequence[Notification]:
        query = self.session.query(NotificationModel)
        query = query.filter(NotificationModel.recipient_id == recipient_id)
        if unread_only:
            query = query.filter(NotificationModel.is_read.is_(False))
        query = query.order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if skip:
            query = query.offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_unread(self, recipient_id: int) -> int:
        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.recipient_id == recipient_id)
            .filter(NotificationModel.is_read.is_(False))
            .count()
        )

    def find_existing(
        self,
        *,
        recipient_id: int,
        actor_id: int,
        notification_type: NotificationType,
        related_type: str,
        related_id: int,
    ) -> Notification | None:
        model = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.recipient_id == recipient_id)
            .filter(NotificationModel.actor_id == actor_id)
            .filter(NotificationModel.type == NotificationType(notification_type).value)
            .filter(NotificationModel.related_type == related_type)
            .filter(NotificationModel.related_id == related_id)
            .order_by(NotificationModel.id.desc())
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, notification: Notification, *, commit: bool = True) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        if commit:
            self.session.commit()
        else:
            self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def mark_as_read(self, notification_id: int) -> None:
        self.session.query(NotificationModel).filter(
            NotificationModel.id == notification_id,
            NotificationModel.is_read.is_(False),
        ).update({NotificationModel.is_read: True}, synchronize_session=False)
        self.session.commit()

    def mark_all_as_read(self, recipient_id: int) -> int:
        affected = (
            self.session.query(NotificationModel)
            .filter(
                NotificationModel.recipient_id == recipient_id,
                NotificationModel.is_read.is_(False),
            )
            .update({NotificationModel.is_read: True}, synchronize_session=False)
        )
        self.session.commit()
        return int(affected or 0)

    def delete(self, notification_id: int) -> None:
        self.session.query(NotificationModel).filter(
            NotificationModel.id == notification_id
        ).delete(synchronize_session=False)
        self.session.commit()

    @staticmethod
    def _apply_entity_to_model(model: NotificationModel, notification: Notification) -> None:
        model.created_at = (
            ensure_app_naive_datetime(notification.created_at)
            or ensure_app_naive_datetime(now_in_app_timezone())
        )
        model.recipient_id = notification.recipient_id
        model.type = NotificationType(notification.type).value
        model.title = notification.title
        model.message = notification.message
        model.related_id = notification.related_id
        model.related_type = notification.related_type
        model.is_read = notification.is_read
        model.actor_id = notification.actor_id
        model.actor_name = notification.actor_name
        model.actor_image = notification.actor_image
        model.interaction_id = notification.interaction_id

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_id=model.recipient_id,
            type=NotificationType(model.type),
            title=model.title,
            message=model.message,
            related_id=model.related_id,
            related_type=model.related_type,
            is_read=bool(model.is_read),
            created_at=ensure_app_timezone(model.created_at),
            actor_id=model.actor_id,
            actor_name=model.actor_name,
            actor_image=model.actor_image,
            interaction_id=model.interaction_id,
        )


__all__ = ["NotificationRepository"]
