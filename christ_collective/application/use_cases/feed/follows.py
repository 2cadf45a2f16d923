"""Use cases for following users and ministries."""

from __future__ import annotations

from sqlalchemy.orm import Session

from christ_collective.application.use_cases.fanout import InteractionOutcome, record_and_notify
from christ_collective.application.use_cases.interactions import remove_interaction
from christ_collective.domain.entities import ActionType, RelatedType
from christ_collective.infrastructure.repositories import InteractionRepository


def follow_user(session: Session, *, follower_id: int, user_id: int) -> InteractionOutcome:
    """Follow ``user_id``; following twice keeps a single follow.

    Following yourself is recorded like any other follow but notifies no one.
    """

    return record_and_notify(
        session,
        actor_id=follower_id,
        action_type=ActionType.FOLLOW,
        related_id=user_id,
        related_type=RelatedType.USER,
    )


def unfollow_user(session: Session, *, follower_id: int, user_id: int) -> bool:
    return remove_interaction(
        session,
        actor_id=follower_id,
        action_type=ActionType.FOLLOW,
        related_id=user_id,
        related_type=RelatedType.USER,
    )


def follow_ministry(session: Session, *, follower_id: int, ministry_id: int) -> InteractionOutcome:
    return record_and_notify(
        session,
        actor_id=follower_id,
        action_type=ActionType.FOLLOW,
        related_id=ministry_id,
        related_type=RelatedType.MINISTRY,
    )


def unfollow_ministry(session: Session, *, follower_id: int, ministry_id: int) -> bool:
    return remove_interaction(
        session,
        actor_id=follower_id,
        action_type=ActionType.FOLLOW,
        related_id=ministry_id,
        related_type=RelatedType.MINISTRY,
    )


def list_follower_ids(
    session: Session, *, related_type: RelatedType | str, related_id: int
) -> list[int]:
    return InteractionRepository(session).list_actor_ids_for_related(
        RelatedType(related_type), related_id, ActionType.FOLLOW
    )


__all__ = [
    "follow_ministry",
    "follow_user",
    "list_follower_ids",
    "unfollow_ministry",
    "unfollow_user",
]
