"""Use case for undoing an idempotent interaction (unlike, unfollow, cancel RSVP)."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from christ_collective.domain.entities import (
    IDEMPOTENT_ACTIONS,
    ActionType,
    RelatedType,
    build_dedupe_key,
)
from christ_collective.infrastructure.repositories import InteractionRepository

logger = logging.getLogger(__name__)


def remove_interaction(
    session: Session,
    *,
    actor_id: int,
    action_type: ActionType | str,
    related_id: int,
    related_type: RelatedType | str,
) -> bool:
    """Delete the interaction and return whether a row was removed.

    Notifications already derived from it are left untouched.
    """

    action_type = ActionType(action_type)
    related_type = RelatedType(related_type)
    if action_type not in IDEMPOTENT_ACTIONS:
        msg = f"'{action_type.value}' interactions cannot be removed"
        raise ValueError(msg)

    dedupe_key = build_dedupe_key(actor_id, action_type, related_type, related_id)
    removed = InteractionRepository(session).delete_by_dedupe_key(dedupe_key)
    if removed:
        logger.info("Removed interaction %s", dedupe_key)
    return removed


__all__ = ["remove_interaction"]
