"""Conversions from domain entities to response schemas shared by routers."""

from christ_collective.application.use_cases.fanout import InteractionOutcome
from christ_collective.domain.entities import Interaction, Notification
from christ_collective.interfaces.api.schemas import (
    InteractionOutcomeRead,
    InteractionRead,
    NotificationRead,
)


def interaction_to_schema(interaction: Interaction) -> InteractionRead:
    return InteractionRead.model_validate(interaction)


def notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


def outcome_to_schema(outcome: InteractionOutcome) -> InteractionOutcomeRead:
    notification = outcome.notification
    return InteractionOutcomeRead(
        interaction=interaction_to_schema(outcome.interaction),
        created=outcome.created,
        notification_id=notification.id if notification else None,
    )
