"""Resolve the owner and display label of an interaction target."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.orm import Session

from christ_collective.domain.entities import RelatedType
from christ_collective.domain.errors import ForbiddenError, NotFoundError
from christ_collective.infrastructure.repositories import (
    CampaignRepository,
    ChatRepository,
    MinistryRepository,
    PostRepository,
    UserRepository,
)


@dataclass(frozen=True)
class ResolvedTarget:
    """Owner of a related entity plus the label used in notification messages."""

    owner_id: int
    label: str


def resolve_target(
    session: Session,
    *,
    actor_id: int,
    related_type: RelatedType | str,
    related_id: int,
) -> ResolvedTarget:
    """Return who owns ``related_type``/``related_id`` from ``actor_id``'s view.

    Raises :class:`NotFoundError` when the entity does not exist and
    :class:`ForbiddenError` when ``actor_id`` writes to a chat they are not
    part of.
    """

    related_type = RelatedType(related_type)

    if related_type is RelatedType.USER:
        user = UserRepository(session).get(related_id)
        if user is None or not user.is_active:
            raise NotFoundError(f"User {related_id} not found")
        return ResolvedTarget(owner_id=user.id, label="you")

    if related_type is RelatedType.POST:
        post = PostRepository(session).get(related_id)
        if post is None:
            raise NotFoundError(f"Post {related_id} not found")
        return ResolvedTarget(owner_id=post.user_id, label=f"'{post.title}'")

    if related_type is RelatedType.CAMPAIGN:
        campaign = CampaignRepository(session).get(related_id)
        if campaign is None or not campaign.is_active:
            raise NotFoundError(f"Campaign {related_id} not found")
        return ResolvedTarget(owner_id=campaign.user_id, label=f"'{campaign.title}'")

    ministries = MinistryRepository(session)
    if related_type is RelatedType.MINISTRY:
        ministry = ministries.get(related_id)
        if ministry is None:
            raise NotFoundError(f"Ministry {related_id} not found")
        return ResolvedTarget(owner_id=ministry.user_id, label=ministry.name)

    if related_type is RelatedType.MINISTRY_EVENT:
        event = ministries.get_event(related_id)
        ministry = ministries.get(event.ministry_id) if event else None
        if event is None or ministry is None:
            raise NotFoundError(f"Ministry event {related_id} not found")
        return ResolvedTarget(owner_id=ministry.user_id, label=f"'{event.title}'")

    if related_type is RelatedType.CHAT:
        chat = ChatRepository(session).get(related_id)
        if chat is None:
            raise NotFoundError(f"Chat {related_id} not found")
        if not chat.has_participant(actor_id):
            raise ForbiddenError(f"User {actor_id} is not part of chat {related_id}")
        return ResolvedTarget(owner_id=chat.other_participant(actor_id), label="")

    raise NotFoundError(f"Unsupported related type {related_type!r}")  # pragma: no cover


__all__ = ["ResolvedTarget", "resolve_target"]
