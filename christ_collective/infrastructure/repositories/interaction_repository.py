"""Persistence helpers for the interaction ledger."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from christ_collective.domain.entities import ActionType, Interaction, RelatedType
from christ_collective.domain.errors import ConflictError
from christ_collective.infrastructure.models import InteractionModel, NotificationModel
from christ_collective.utils import ensure_app_naive_datetime, ensure_app_timezone


class InteractionRepository:
    """Provide CRUD operations for :class:`Interaction` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, interaction_id: int) -> Interaction | None:
        model = self.session.get(InteractionModel, interaction_id)
        return self._to_entity(model) if model else None

    def get_by_dedupe_key(self, dedupe_key: str) -> Interaction | None:
        model = (
            self.session.query(InteractionModel)
            .filter(InteractionModel.dedupe_key == dedupe_key)
            .first()
        )
        return self._to_entity(model) if model else None

    def create(self, interaction: Interaction, *, commit: bool = True) -> Interaction:
        """Persist ``interaction``.

        The insert runs inside a savepoint, so a duplicate ``dedupe_key`` only
        undoes this row: work already flushed by the caller stays pending and
        :class:`ConflictError` is raised.
        """

        model = InteractionModel(
            actor_id=interaction.actor_id,
            target_owner_id=interaction.target_owner_id,
            action_type=ActionType(interaction.action_type).value,
            related_type=RelatedType(interaction.related_type).value,
            related_id=interaction.related_id,
            body=interaction.body,
            dedupe_key=interaction.dedupe_key,
        )
        if interaction.occurred_at is not None:
            model.occurred_at = ensure_app_naive_datetime(interaction.occurred_at)
        try:
            with self.session.begin_nested():
                self.session.add(model)
        except IntegrityError as exc:
            key = interaction.dedupe_key
            if key is not None and self.get_by_dedupe_key(key) is not None:
                raise ConflictError(key) from exc
            raise
        if commit:
            self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete_by_dedupe_key(self, dedupe_key: str, *, commit: bool = True) -> bool:
        model = (
            self.session.query(InteractionModel)
            .filter(InteractionModel.dedupe_key == dedupe_key)
            .first()
        )
        if model is None:
            return False
        self.session.query(NotificationModel).filter(
            NotificationModel.interaction_id == model.id
        ).update({NotificationModel.interaction_id: None}, synchronize_session=False)
        self.session.delete(model)
        if commit:
            self.session.commit()
        else:
            self.session.flush()
        return True

    def list_for_related(
        self,
        related_type: RelatedType,
        related_id: int,
        action_type: ActionType,
        *,
        skip: int = 0,
        limit: int | None = 100,
    ) -> Sequence[Interaction]:
        query = (
            self.session.query(InteractionModel)
            .filter(InteractionModel.related_type == RelatedType(related_type).value)
            .filter(InteractionModel.related_id == related_id)
            .filter(InteractionModel.action_type == ActionType(action_type).value)
            .order_by(InteractionModel.occurred_at.asc(), InteractionModel.id.asc())
            .offset(skip)
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def count_for_related(
        self, related_type: RelatedType, related_id: int, action_type: ActionType
    ) -> int:
        return (
            self.session.query(InteractionModel)
            .filter(InteractionModel.related_type == RelatedType(related_type).value)
            .filter(InteractionModel.related_id == related_id)
            .filter(InteractionModel.action_type == ActionType(action_type).value)
            .count()
        )

    def list_actor_ids_for_related(
        self, related_type: RelatedType, related_id: int, action_type: ActionType
    ) -> list[int]:
        """Return the distinct actors of ``action_type`` on the given entity."""

        query = (
            self.session.query(InteractionModel.actor_id)
            .filter(InteractionModel.related_type == RelatedType(related_type).value)
            .filter(InteractionModel.related_id == related_id)
            .filter(InteractionModel.action_type == ActionType(action_type).value)
            .distinct()
            .order_by(InteractionModel.actor_id)
        )
        return [actor_id for (actor_id,) in query.all()]

    @staticmethod
    def _to_entity(model: InteractionModel) -> Interaction:
        return Interaction(
            id=model.id,
            actor_id=model.actor_id,
            target_owner_id=model.target_owner_id,
            action_type=ActionType(model.action_type),
            related_id=model.related_id,
            related_type=RelatedType(model.related_type),
            occurred_at=ensure_app_timezone(model.occurred_at),
            body=model.body,
            dedupe_key=model.dedupe_key,
        )


__all__ = ["InteractionRepository"]
