"""Use cases for direct chats."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from christ_collective.application.use_cases.fanout import InteractionOutcome, record_and_notify
from christ_collective.application.use_cases.users import get_user
from christ_collective.domain.entities import ActionType, Chat, Interaction, RelatedType
from christ_collective.domain.errors import ForbiddenError, NotFoundError
from christ_collective.infrastructure.repositories import ChatRepository, InteractionRepository


def open_chat(session: Session, *, user_id: int, other_user_id: int) -> Chat:
    """Return the chat between both users, creating it on first use."""

    if user_id == other_user_id:
        raise ValueError("A chat needs two different participants")
    get_user(session, other_user_id)
    repository = ChatRepository(session)
    chat = repository.get_between(user_id, other_user_id)
    if chat is not None:
        return chat
    return repository.create(user_id, other_user_id)


def send_message(
    session: Session, *, user_id: int, chat_id: int, content: str
) -> InteractionOutcome:
    content = content.strip()
    if not content:
        raise ValueError("Message content cannot be empty")
    return record_and_notify(
        session,
        actor_id=user_id,
        action_type=ActionType.MESSAGE,
        related_id=chat_id,
        related_type=RelatedType.CHAT,
        body=content,
    )


def list_messages(
    session: Session, *, user_id: int, chat_id: int, skip: int = 0, limit: int = 100
) -> Sequence[Interaction]:
    chat = ChatRepository(session).get(chat_id)
    if chat is None:
        raise NotFoundError("Chat not found")
    if not chat.has_participant(user_id):
        raise ForbiddenError("Not a participant of this chat")
    return InteractionRepository(session).list_for_related(
        RelatedType.CHAT, chat_id, ActionType.MESSAGE, skip=skip, limit=limit
    )


__all__ = ["list_messages", "open_chat", "send_message"]
