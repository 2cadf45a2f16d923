"""Domain entity describing a recorded social interaction."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class ActionType(str, Enum):
    """Social actions that can be recorded against a target entity."""

    LIKE = "like"
    COMMENT = "comment"
    FOLLOW = "follow"
    MESSAGE = "message"
    RSVP = "rsvp"
    CAMPAIGN_UPDATE = "campaign_update"
    MINISTRY_POST = "ministry_post"


class RelatedType(str, Enum):
    """Kinds of entities an interaction or notification can point at."""

    USER = "user"
    POST = "post"
    CAMPAIGN = "campaign"
    MINISTRY = "ministry"
    MINISTRY_EVENT = "ministry_event"
    CHAT = "chat"


# Actions that may be recorded at most once per actor and target.
IDEMPOTENT_ACTIONS: frozenset[ActionType] = frozenset(
    {ActionType.LIKE, ActionType.FOLLOW, ActionType.RSVP}
)

ALLOWED_TARGETS: dict[ActionType, frozenset[RelatedType]] = {
    ActionType.LIKE: frozenset({RelatedType.POST}),
    ActionType.COMMENT: frozenset({RelatedType.POST}),
    ActionType.FOLLOW: frozenset({RelatedType.USER, RelatedType.MINISTRY}),
    ActionType.MESSAGE: frozenset({RelatedType.CHAT}),
    ActionType.RSVP: frozenset({RelatedType.MINISTRY_EVENT}),
    ActionType.CAMPAIGN_UPDATE: frozenset({RelatedType.CAMPAIGN}),
    ActionType.MINISTRY_POST: frozenset({RelatedType.POST}),
}

# Broadcast actions name their recipient explicitly instead of the entity owner.
BROADCAST_ACTIONS: frozenset[ActionType] = frozenset({ActionType.MINISTRY_POST})


def build_dedupe_key(
    actor_id: int,
    action_type: ActionType,
    related_type: RelatedType,
    related_id: int,
) -> str | None:
    """Return the uniqueness key for idempotent actions, ``None`` otherwise."""

    if action_type not in IDEMPOTENT_ACTIONS:
        return None
    return f"{actor_id}:{action_type.value}:{related_type.value}:{related_id}"


@dataclass
class Interaction:
    """A social action performed by ``actor_id`` on an entity owned by someone."""

    id: int | None
    actor_id: int
    target_owner_id: int
    action_type: ActionType
    related_id: int
    related_type: RelatedType
    occurred_at: datetime | None = None
    body: str | None = None
    dedupe_key: str | None = None

    @property
    def is_self_action(self) -> bool:
        return self.actor_id == self.target_owner_id


@dataclass(frozen=True)
class RecordedInteraction:
    """Result of recording an interaction.

    ``created`` is ``False`` when an identical idempotent interaction already
    existed and was returned instead of a new row.
    """

    interaction: Interaction
    created: bool


__all__ = [
    "ActionType",
    "RelatedType",
    "IDEMPOTENT_ACTIONS",
    "ALLOWED_TARGETS",
    "BROADCAST_ACTIONS",
    "build_dedupe_key",
    "Interaction",
    "RecordedInteraction",
]
