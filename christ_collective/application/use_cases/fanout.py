"""Record an interaction and derive its notification in one transaction."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from christ_collective.domain.entities import (
    ActionType,
    Interaction,
    Notification,
    RelatedType,
)

from .interactions import record_interaction
from .notifications import derive_notification


@dataclass(frozen=True)
class InteractionOutcome:
    """Interaction stored (or found) plus the notification it produced, if any."""

    interaction: Interaction
    created: bool
    notification: Notification | None


def record_and_notify(
    session: Session,
    *,
    actor_id: int,
    action_type: ActionType | str,
    related_id: int,
    related_type: RelatedType | str,
    body: str | None = None,
    target_owner_id: int | None = None,
) -> InteractionOutcome:
    """Run the recorder and the deriver as a single unit of work.

    A duplicate idempotent interaction returns the existing row and derives
    nothing; its notification decision was taken when it was first recorded.
    """

    try:
        recorded = record_interaction(
            session,
            actor_id=actor_id,
            action_type=action_type,
            related_id=related_id,
            related_type=related_type,
            body=body,
            target_owner_id=target_owner_id,
            commit=False,
        )
        notification = None
        if recorded.created:
            notification = derive_notification(session, recorded.interaction, commit=False)
        session.commit()
    except Exception:
        session.rollback()
        raise
    return InteractionOutcome(
        interaction=recorded.interaction,
        created=recorded.created,
        notification=notification,
    )


__all__ = ["InteractionOutcome", "record_and_notify"]
