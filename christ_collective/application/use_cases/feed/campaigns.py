"""Use cases for donation campaigns and their supporter updates."""

from __future__ import annotations

import re
import unicodedata

from sqlalchemy.orm import Session

from christ_collective.application.use_cases.fanout import InteractionOutcome, record_and_notify
from christ_collective.application.use_cases.users import get_user
from christ_collective.domain.entities import ActionType, Campaign, RelatedType
from christ_collective.infrastructure.repositories import CampaignRepository

_SLUG_SEPARATOR = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    normalized = unicodedata.normalize("NFKD", value)
    ascii_text = "".join(char for char in normalized if not unicodedata.combining(char))
    return _SLUG_SEPARATOR.sub("-", ascii_text.lower()).strip("-") or "campaign"


def create_campaign(session: Session, *, owner_id: int, title: str) -> Campaign:
    """Create a campaign with a unique slug derived from ``title``."""

    get_user(session, owner_id)
    repository = CampaignRepository(session)
    base_slug = slugify(title)
    slug = base_slug
    suffix = 2
    while repository.slug_exists(slug):
        slug = f"{base_slug}-{suffix}"
        suffix += 1
    return repository.create(
        Campaign(id=None, user_id=owner_id, title=title.strip(), slug=slug)
    )


def post_campaign_update(
    session: Session, *, user_id: int, campaign_id: int, content: str
) -> InteractionOutcome:
    """Record an update posted on a campaign and notify the campaign owner."""

    content = content.strip()
    if not content:
        raise ValueError("Update content cannot be empty")
    return record_and_notify(
        session,
        actor_id=user_id,
        action_type=ActionType.CAMPAIGN_UPDATE,
        related_id=campaign_id,
        related_type=RelatedType.CAMPAIGN,
        body=content,
    )


__all__ = ["create_campaign", "post_campaign_update", "slugify"]
