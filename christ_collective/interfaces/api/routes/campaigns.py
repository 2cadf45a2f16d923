"""Routes for donation campaigns."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from christ_collective.application.use_cases.feed import (
    create_campaign as create_campaign_uc,
    post_campaign_update,
)
from christ_collective.domain.entities import User
from christ_collective.domain.errors import LedgerError
from christ_collective.infrastructure.database import get_db
from christ_collective.interfaces.api.dependencies import get_current_active_user
from christ_collective.interfaces.api.routes_helpers import bad_request, http_error_from
from christ_collective.interfaces.api.schemas import (
    CampaignCreate,
    CampaignRead,
    ContentCreate,
    InteractionOutcomeRead,
)

from .serializers import outcome_to_schema

router = APIRouter(prefix="/campaigns", tags=["campaigns"])


@router.post("/", response_model=CampaignRead, status_code=status.HTTP_201_CREATED)
def create_campaign(
    campaign_in: CampaignCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    campaign = create_campaign_uc(db, owner_id=current_user.id, title=campaign_in.title)
    return CampaignRead.model_validate(campaign)


@router.post(
    "/{campaign_id}/updates",
    response_model=InteractionOutcomeRead,
    status_code=status.HTTP_201_CREATED,
)
def create_campaign_update(
    campaign_id: int,
    update_in: ContentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Post an update on a campaign; the campaign owner is notified."""

    try:
        outcome = post_campaign_update(
            db, user_id=current_user.id, campaign_id=campaign_id, content=update_in.content
        )
    except LedgerError as exc:
        raise http_error_from(exc) from exc
    except ValueError as exc:
        raise bad_request(exc) from exc
    return outcome_to_schema(outcome)
