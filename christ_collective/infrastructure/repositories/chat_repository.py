"""Persistence helpers for direct chats."""

from __future__ import annotations

from sqlalchemy.orm import Session

from christ_collective.domain.entities import Chat
from christ_collective.infrastructure.models import ChatModel
from christ_collective.utils import ensure_app_timezone


class ChatRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, chat_id: int) -> Chat | None:
        model = self.session.get(ChatModel, chat_id)
        return self._to_entity(model) if model else None

    def get_between(self, user_id: int, other_user_id: int) -> Chat | None:
        low, high = sorted((user_id, other_user_id))
        model = (
            self.session.query(ChatModel)
            .filter(ChatModel.user_a_id == low, ChatModel.user_b_id == high)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, user_id: int, other_user_id: int) -> Chat:
        low, high = sorted((user_id, other_user_id))
        model = ChatModel(user_a_id=low, user_b_id=high)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: ChatModel) -> Chat:
        return Chat(
            id=model.id,
            user_a_id=model.user_a_id,
            user_b_id=model.user_b_id,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ChatRepository"]
