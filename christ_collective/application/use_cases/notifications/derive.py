"""Derive notifications from recorded interactions."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from christ_collective.application.use_cases.interactions import (
    resolve_target,
    should_notify,
)
from christ_collective.domain.entities import (
    IDEMPOTENT_ACTIONS,
    Interaction,
    Notification,
    NotificationType,
    User,
)
from christ_collective.domain.errors import NotFoundError, UnknownNotificationTypeError
from christ_collective.domain.notification_templates import render_notification
from christ_collective.infrastructure.repositories import (
    NotificationRepository,
    UserRepository,
)
from christ_collective.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def derive_notification(
    session: Session, interaction: Interaction, *, commit: bool = True
) -> Notification | None:
    """Create the notification owed to the target owner of ``interaction``.

    Returns ``None`` for self-actions. For idempotent actions an earlier
    notification from the same actor about the same entity is returned instead
    of creating a second one.
    """

    if not should_notify(interaction.actor_id, interaction.target_owner_id):
        logger.debug(
            "Suppressed %s notification for self-action by user %s",
            interaction.action_type.value,
            interaction.actor_id,
        )
        return None

    try:
        notification_type = NotificationType(interaction.action_type.value)
    except ValueError as exc:
        logger.error("Interaction #%s has no notification type", interaction.id)
        raise UnknownNotificationTypeError(interaction.action_type) from exc

    repository = NotificationRepository(session)
    if interaction.action_type in IDEMPOTENT_ACTIONS:
        existing = repository.find_existing(
            recipient_id=interaction.target_owner_id,
            actor_id=interaction.actor_id,
            notification_type=notification_type,
            related_type=interaction.related_type.value,
            related_id=interaction.related_id,
        )
        if existing is not None:
            return existing

    actor = _get_actor(session, interaction.actor_id)
    target = resolve_target(
        session,
        actor_id=interaction.actor_id,
        related_type=interaction.related_type,
        related_id=interaction.related_id,
    )
    title, message = _render(notification_type, actor=actor.name, target=target.label)

    notification = Notification(
        id=None,
        recipient_id=interaction.target_owner_id,
        type=notification_type,
        title=title,
        message=message,
        related_id=interaction.related_id,
        related_type=interaction.related_type.value,
        is_read=False,
        created_at=now_in_app_timezone(),
        actor_id=actor.id,
        actor_name=actor.name,
        actor_image=actor.profile_image_url,
        interaction_id=interaction.id,
    )
    return repository.create(notification, commit=commit)


def notify_user(
    session: Session,
    *,
    recipient_id: int,
    notification_type: NotificationType | str,
    target: str,
    actor_id: int | None = None,
    related_id: int | None = None,
    related_type: str | None = None,
    commit: bool = True,
) -> Notification:
    """Create a notification that is not backed by a recorded interaction.

    Used for ``post`` fan-out to followers and for ``info`` messages.
    """

    if UserRepository(session).get(recipient_id) is None:
        raise NotFoundError(f"User {recipient_id} not found")

    actor = _get_actor(session, actor_id) if actor_id is not None else None
    title, message = _render(
        notification_type,
        actor=actor.name if actor else "",
        target=target,
    )
    notification = Notification(
        id=None,
        recipient_id=recipient_id,
        type=NotificationType(notification_type),
        title=title,
        message=message,
        related_id=related_id,
        related_type=related_type,
        is_read=False,
        created_at=now_in_app_timezone(),
        actor_id=actor.id if actor else None,
        actor_name=actor.name if actor else None,
        actor_image=actor.profile_image_url if actor else None,
    )
    return NotificationRepository(session).create(notification, commit=commit)


def _get_actor(session: Session, actor_id: int) -> User:
    actor = UserRepository(session).get(actor_id)
    if actor is None:
        raise NotFoundError(f"User {actor_id} not found")
    return actor


def _render(
    notification_type: NotificationType | str, *, actor: str, target: str
) -> tuple[str, str]:
    try:
        return render_notification(notification_type, actor=actor, target=target)
    except UnknownNotificationTypeError:
        logger.error("No notification template for %r", notification_type)
        raise


__all__ = ["derive_notification", "notify_user"]
