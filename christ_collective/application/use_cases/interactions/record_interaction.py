"""Use case for recording a social interaction in the ledger."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from christ_collective.domain.entities import (
    ALLOWED_TARGETS,
    BROADCAST_ACTIONS,
    ActionType,
    Interaction,
    RecordedInteraction,
    RelatedType,
    build_dedupe_key,
)
from christ_collective.domain.errors import ConflictError, NotFoundError
from christ_collective.infrastructure.repositories import (
    InteractionRepository,
    UserRepository,
)
from christ_collective.utils import now_in_app_timezone

from .targets import resolve_target

logger = logging.getLogger(__name__)


def record_interaction(
    session: Session,
    *,
    actor_id: int,
    action_type: ActionType | str,
    related_id: int,
    related_type: RelatedType | str,
    body: str | None = None,
    target_owner_id: int | None = None,
    commit: bool = True,
) -> RecordedInteraction:
    """Persist an interaction and return it.

    Idempotent actions (likes, follows, RSVPs) are stored at most once per
    actor and target: a duplicate returns the existing row with
    ``created=False``. ``target_owner_id`` is required for broadcast actions
    and rejected for every other action.
    """

    action_type = ActionType(action_type)
    related_type = RelatedType(related_type)

    if related_type not in ALLOWED_TARGETS[action_type]:
        raise NotFoundError(
            f"No {related_type.value} {related_id} can receive a '{action_type.value}'"
        )
    if (action_type in BROADCAST_ACTIONS) != (target_owner_id is not None):
        msg = f"target_owner_id is only accepted for broadcast actions, got '{action_type.value}'"
        raise ValueError(msg)

    actor = UserRepository(session).get(actor_id)
    if actor is None or not actor.is_active:
        raise NotFoundError(f"User {actor_id} not found")

    target = resolve_target(
        session, actor_id=actor_id, related_type=related_type, related_id=related_id
    )
    if target_owner_id is None:
        target_owner_id = target.owner_id
    elif UserRepository(session).get(target_owner_id) is None:
        raise NotFoundError(f"User {target_owner_id} not found")

    repository = InteractionRepository(session)
    dedupe_key = build_dedupe_key(actor_id, action_type, related_type, related_id)
    if dedupe_key is not None:
        existing = repository.get_by_dedupe_key(dedupe_key)
        if existing is not None:
            logger.debug("Interaction %s already recorded as #%s", dedupe_key, existing.id)
            return RecordedInteraction(interaction=existing, created=False)

    interaction = Interaction(
        id=None,
        actor_id=actor_id,
        target_owner_id=target_owner_id,
        action_type=action_type,
        related_id=related_id,
        related_type=related_type,
        occurred_at=now_in_app_timezone(),
        body=body,
        dedupe_key=dedupe_key,
    )
    try:
        saved = repository.create(interaction, commit=commit)
    except ConflictError as exc:
        # Lost a race against an identical request; the winner's row stands.
        existing = repository.get_by_dedupe_key(exc.dedupe_key)
        if existing is None:  # pragma: no cover - row vanished between calls
            raise
        logger.debug("Absorbed concurrent duplicate interaction %s", exc.dedupe_key)
        return RecordedInteraction(interaction=existing, created=False)

    logger.info(
        "Recorded %s by user %s on %s %s",
        action_type.value,
        actor_id,
        related_type.value,
        related_id,
    )
    return RecordedInteraction(interaction=saved, created=True)


__all__ = ["record_interaction"]
