"""Persistence helpers for ministries and ministry events."""

from __future__ import annotations

from sqlalchemy.orm import Session

from christ_collective.domain.entities import Ministry, MinistryEvent
from christ_collective.infrastructure.models import MinistryEventModel, MinistryModel
from christ_collective.utils import ensure_app_naive_datetime, ensure_app_timezone


class MinistryRepository:
    """Provide CRUD operations for :class:`Ministry` and its events."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, ministry_id: int) -> Ministry | None:
        model = self.session.get(MinistryModel, ministry_id)
        return self._to_entity(model) if model else None

    def create(self, ministry: Ministry) -> Ministry:
        model = MinistryModel(user_id=ministry.user_id, name=ministry.name, logo=ministry.logo)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def get_event(self, event_id: int) -> MinistryEvent | None:
        model = self.session.get(MinistryEventModel, event_id)
        return self._event_to_entity(model) if model else None

    def create_event(self, event: MinistryEvent) -> MinistryEvent:
        model = MinistryEventModel(
            ministry_id=event.ministry_id,
            title=event.title,
            start_date=ensure_app_naive_datetime(event.start_date),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._event_to_entity(model)

    @staticmethod
    def _to_entity(model: MinistryModel) -> Ministry:
        return Ministry(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            logo=model.logo,
            created_at=ensure_app_timezone(model.created_at),
        )

    @staticmethod
    def _event_to_entity(model: MinistryEventModel) -> MinistryEvent:
        return MinistryEvent(
            id=model.id,
            ministry_id=model.ministry_id,
            title=model.title,
            start_date=ensure_app_timezone(model.start_date),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["MinistryRepository"]
