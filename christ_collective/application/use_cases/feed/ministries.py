"""Use cases for ministries: posts to followers, events and RSVPs."""

from __future__ import annotations

import logging
from datetime import datetime

from sqlalchemy.orm import Session

from christ_collective.application.use_cases.fanout import InteractionOutcome, record_and_notify
from christ_collective.application.use_cases.interactions import (
    record_interaction,
    remove_interaction,
)
from christ_collective.application.use_cases.notifications import derive_notification
from christ_collective.application.use_cases.users import get_user
from christ_collective.domain.entities import (
    ActionType,
    Ministry,
    MinistryEvent,
    Post,
    RelatedType,
)
from christ_collective.domain.errors import ForbiddenError, NotFoundError
from christ_collective.infrastructure.repositories import (
    InteractionRepository,
    MinistryRepository,
    PostRepository,
)

logger = logging.getLogger(__name__)


def get_ministry(session: Session, ministry_id: int) -> Ministry:
    ministry = MinistryRepository(session).get(ministry_id)
    if ministry is None:
        raise NotFoundError("Ministry not found")
    return ministry


def _get_owned_ministry(session: Session, ministry_id: int, user_id: int) -> Ministry:
    ministry = get_ministry(session, ministry_id)
    if ministry.user_id != user_id:
        raise ForbiddenError("Only the ministry owner can do that")
    return ministry


def create_ministry(
    session: Session, *, owner_id: int, name: str, logo: str | None = None
) -> Ministry:
    get_user(session, owner_id)
    return MinistryRepository(session).create(
        Ministry(id=None, user_id=owner_id, name=name.strip(), logo=logo)
    )


def publish_ministry_post(
    session: Session, *, user_id: int, ministry_id: int, title: str, content: str
) -> tuple[Post, int]:
    """Publish a post for a ministry and notify each of its followers.

    Returns the post and the number of notifications created.
    """

    _get_owned_ministry(session, ministry_id, user_id)
    followers = InteractionRepository(session).list_actor_ids_for_related(
        RelatedType.MINISTRY, ministry_id, ActionType.FOLLOW
    )
    delivered = 0
    try:
        post = PostRepository(session).create(
            Post(
                id=None,
                user_id=user_id,
                ministry_id=ministry_id,
                title=title.strip(),
                content=content,
            ),
            commit=False,
        )
        for follower_id in followers:
            recorded = record_interaction(
                session,
                actor_id=user_id,
                action_type=ActionType.MINISTRY_POST,
                related_id=post.id,
                related_type=RelatedType.POST,
                target_owner_id=follower_id,
                commit=False,
            )
            if derive_notification(session, recorded.interaction, commit=False):
                delivered += 1
        session.commit()
    except Exception:
        session.rollback()
        raise
    logger.info(
        "Ministry %s post %s delivered to %s of %s followers",
        ministry_id,
        post.id,
        delivered,
        len(followers),
    )
    return post, delivered


def create_ministry_event(
    session: Session, *, user_id: int, ministry_id: int, title: str, start_date: datetime
) -> MinistryEvent:
    _get_owned_ministry(session, ministry_id, user_id)
    return MinistryRepository(session).create_event(
        MinistryEvent(id=None, ministry_id=ministry_id, title=title.strip(), start_date=start_date)
    )


def rsvp_event(session: Session, *, user_id: int, event_id: int) -> InteractionOutcome:
    return record_and_notify(
        session,
        actor_id=user_id,
        action_type=ActionType.RSVP,
        related_id=event_id,
        related_type=RelatedType.MINISTRY_EVENT,
    )


def cancel_rsvp(session: Session, *, user_id: int, event_id: int) -> bool:
    return remove_interaction(
        session,
        actor_id=user_id,
        action_type=ActionType.RSVP,
        related_id=event_id,
        related_type=RelatedType.MINISTRY_EVENT,
    )


__all__ = [
    "cancel_rsvp",
    "create_ministry",
    "create_ministry_event",
    "get_ministry",
    "publish_ministry_post",
    "rsvp_event",
]
