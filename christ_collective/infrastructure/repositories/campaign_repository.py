"""Persistence helpers for donation campaigns."""

from __future__ import annotations

from sqlalchemy.orm import Session

from christ_collective.domain.entities import Campaign
from christ_collective.infrastructure.models import CampaignModel
from christ_collective.utils import ensure_app_timezone


class CampaignRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, campaign_id: int) -> Campaign | None:
        model = self.session.get(CampaignModel, campaign_id)
        return self._to_entity(model) if model else None

    def slug_exists(self, slug: str) -> bool:
        query = self.session.query(CampaignModel.id).filter(CampaignModel.slug == slug)
        return query.first() is not None

    def create(self, campaign: Campaign) -> Campaign:
        model = CampaignModel(
            user_id=campaign.user_id,
            title=campaign.title,
            slug=campaign.slug,
            is_active=campaign.is_active,
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: CampaignModel) -> Campaign:
        return Campaign(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            slug=model.slug,
            is_active=model.is_active,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["CampaignRepository"]
