"""Routes for ministry profiles, their posts, followers and events."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from christ_collective.application.use_cases.feed import (
    cancel_rsvp,
    create_ministry as create_ministry_uc,
    create_ministry_event as create_ministry_event_uc,
    follow_ministry as follow_ministry_uc,
    publish_ministry_post,
    rsvp_event,
    unfollow_ministry as unfollow_ministry_uc,
)
from christ_collective.domain.entities import User
from christ_collective.domain.errors import LedgerError
from christ_collective.infrastructure.database import get_db
from christ_collective.interfaces.api.dependencies import get_current_active_user
from christ_collective.interfaces.api.routes_helpers import http_error_from
from christ_collective.interfaces.api.schemas import (
    InteractionOutcomeRead,
    MinistryCreate,
    MinistryEventCreate,
    MinistryEventRead,
    MinistryPostRead,
    MinistryRead,
    PostCreate,
    PostRead,
    UnfollowRead,
)

from .serializers import outcome_to_schema

router = APIRouter(prefix="/ministries", tags=["ministries"])


@router.post("/", response_model=MinistryRead, status_code=status.HTTP_201_CREATED)
def create_ministry(
    ministry_in: MinistryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    ministry = create_ministry_uc(
        db, owner_id=current_user.id, name=ministry_in.name, logo=ministry_in.logo
    )
    return MinistryRead.model_validate(ministry)


@router.post("/{ministry_id}/follow", response_model=InteractionOutcomeRead)
def follow_ministry(
    ministry_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        outcome = follow_ministry_uc(db, follower_id=current_user.id, ministry_id=ministry_id)
    except LedgerError as exc:
        raise http_error_from(exc) from exc
    return outcome_to_schema(outcome)


@router.delete("/{ministry_id}/follow", response_model=UnfollowRead)
def unfollow_ministry(
    ministry_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    removed = unfollow_ministry_uc(db, follower_id=current_user.id, ministry_id=ministry_id)
    if not removed:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Not following this ministry"
        )
    return UnfollowRead(removed=True)


@router.post(
    "/{ministry_id}/posts",
    response_model=MinistryPostRead,
    status_code=status.HTTP_201_CREATED,
)
def create_ministry_post(
    ministry_id: int,
    post_in: PostCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Publish a ministry post and notify every follower of the ministry."""

    try:
        post, notified = publish_ministry_post(
            db,
            user_id=current_user.id,
            ministry_id=ministry_id,
            title=post_in.title,
            content=post_in.content,
        )
    except LedgerError as exc:
        raise http_error_from(exc) from exc
    return MinistryPostRead(post=PostRead.model_validate(post), notified=notified)


@router.post(
    "/{ministry_id}/events",
    response_model=MinistryEventRead,
    status_code=status.HTTP_201_CREATED,
)
def create_ministry_event(
    ministry_id: int,
    event_in: MinistryEventCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        event = create_ministry_event_uc(
            db,
            user_id=current_user.id,
            ministry_id=ministry_id,
            title=event_in.title,
            start_date=event_in.start_date,
        )
    except LedgerError as exc:
        raise http_error_from(exc) from exc
    return MinistryEventRead.model_validate(event)


@router.post("/events/{event_id}/rsvp", response_model=InteractionOutcomeRead)
def rsvp(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Register attendance; the ministry owner is notified once."""

    try:
        outcome = rsvp_event(db, user_id=current_user.id, event_id=event_id)
    except LedgerError as exc:
        raise http_error_from(exc) from exc
    return outcome_to_schema(outcome)


@router.delete("/events/{event_id}/rsvp", response_model=UnfollowRead)
def cancel_event_rsvp(
    event_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    removed = cancel_rsvp(db, user_id=current_user.id, event_id=event_id)
    if not removed:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No RSVP to cancel")
    return UnfollowRead(removed=True)
