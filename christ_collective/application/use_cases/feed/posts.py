"""Use cases for platform posts, likes and comments."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from sqlalchemy.orm import Session

from christ_collective.application.use_cases.fanout import InteractionOutcome, record_and_notify
from christ_collective.application.use_cases.interactions import (
    remove_interaction,
    should_notify,
)
from christ_collective.application.use_cases.notifications import notify_user
from christ_collective.application.use_cases.users import get_user
from christ_collective.domain.entities import (
    ActionType,
    Interaction,
    NotificationType,
    Post,
    RelatedType,
    build_dedupe_key,
)
from christ_collective.domain.errors import NotFoundError
from christ_collective.infrastructure.repositories import (
    InteractionRepository,
    PostRepository,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LikeToggleResult:
    liked: bool
    likes_count: int


def get_post(session: Session, post_id: int) -> Post:
    post = PostRepository(session).get(post_id)
    if post is None:
        raise NotFoundError("Post not found")
    return post


def create_post(session: Session, *, author_id: int, title: str, content: str) -> Post:
    """Publish a post and notify every follower of the author."""

    get_user(session, author_id)
    try:
        post = PostRepository(session).create(
            Post(id=None, user_id=author_id, title=title.strip(), content=content),
            commit=False,
        )
        followers = InteractionRepository(session).list_actor_ids_for_related(
            RelatedType.USER, author_id, ActionType.FOLLOW
        )
        for follower_id in followers:
            if not should_notify(author_id, follower_id):
                continue
            notify_user(
                session,
                recipient_id=follower_id,
                notification_type=NotificationType.POST,
                target=f"'{post.title}'",
                actor_id=author_id,
                related_id=post.id,
                related_type=RelatedType.POST.value,
                commit=False,
            )
        session.commit()
    except Exception:
        session.rollback()
        raise
    logger.info("User %s published post %s to %s followers", author_id, post.id, len(followers))
    return post


def toggle_like(session: Session, *, user_id: int, post_id: int) -> LikeToggleResult:
    """Like ``post_id`` or remove an existing like by ``user_id``."""

    get_post(session, post_id)
    repository = InteractionRepository(session)
    dedupe_key = build_dedupe_key(user_id, ActionType.LIKE, RelatedType.POST, post_id)
    if repository.get_by_dedupe_key(dedupe_key) is not None:
        remove_interaction(
            session,
            actor_id=user_id,
            action_type=ActionType.LIKE,
            related_id=post_id,
            related_type=RelatedType.POST,
        )
        liked = False
    else:
        record_and_notify(
            session,
            actor_id=user_id,
            action_type=ActionType.LIKE,
            related_id=post_id,
            related_type=RelatedType.POST,
        )
        liked = True
    likes_count = repository.count_for_related(RelatedType.POST, post_id, ActionType.LIKE)
    return LikeToggleResult(liked=liked, likes_count=likes_count)


def add_comment(
    session: Session, *, user_id: int, post_id: int, content: str
) -> InteractionOutcome:
    content = content.strip()
    if not content:
        raise ValueError("Comment content cannot be empty")
    return record_and_notify(
        session,
        actor_id=user_id,
        action_type=ActionType.COMMENT,
        related_id=post_id,
        related_type=RelatedType.POST,
        body=content,
    )


def list_comments(
    session: Session, post_id: int, *, skip: int = 0, limit: int = 100
) -> Sequence[Interaction]:
    """Return comments on ``post_id`` oldest first."""

    get_post(session, post_id)
    return InteractionRepository(session).list_for_related(
        RelatedType.POST, post_id, ActionType.COMMENT, skip=skip, limit=limit
    )


__all__ = [
    "LikeToggleResult",
    "add_comment",
    "create_post",
    "get_post",
    "list_comments",
    "toggle_like",
]
