"""Routes for registering users, reading profiles and following people."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from christ_collective.application.use_cases.feed import follow_user, unfollow_user
from christ_collective.application.use_cases.users import (
    create_user as create_user_uc,
    get_user as get_user_uc,
    update_profile as update_profile_uc,
)
from christ_collective.domain.entities import User
from christ_collective.domain.errors import LedgerError
from christ_collective.infrastructure.database import get_db
from christ_collective.interfaces.api.dependencies import get_current_active_user
from christ_collective.interfaces.api.routes_helpers import bad_request, http_error_from
from christ_collective.interfaces.api.schemas import (
    InteractionOutcomeRead,
    UnfollowRead,
    UserCreate,
    UserProfileUpdate,
    UserRead,
)

from .serializers import outcome_to_schema

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


def _to_read_model(user: User) -> UserRead:
    return UserRead.model_validate(user)


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(user_in: UserCreate, db: Session = Depends(get_db)):
    """Create a new account."""

    try:
        user = create_user_uc(
            db,
            name=user_in.name,
            email=user_in.email,
            password=user_in.password,
            profile_image_url=user_in.profile_image_url,
        )
    except ValueError as exc:
        raise bad_request(exc) from exc
    logger.info("Registered user %s", user.id)
    return _to_read_model(user)


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_active_user)):
    return _to_read_model(current_user)


@router.patch("/me", response_model=UserRead)
def update_current_user(
    profile_in: UserProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Update the display name or avatar of the authenticated user."""

    user = update_profile_uc(
        db,
        current_user.id,
        name=profile_in.name,
        profile_image_url=profile_in.profile_image_url,
    )
    return _to_read_model(user)


@router.get("/{user_id}", response_model=UserRead)
def read_user(
    user_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    try:
        user = get_user_uc(db, user_id)
    except LedgerError as exc:
        raise http_error_from(exc) from exc
    return _to_read_model(user)


@router.post("/{user_id}/follow", response_model=InteractionOutcomeRead)
def follow(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Follow ``user_id``. Repeating the call keeps a single follow."""

    try:
        outcome = follow_user(db, follower_id=current_user.id, user_id=user_id)
    except LedgerError as exc:
        raise http_error_from(exc) from exc
    return outcome_to_schema(outcome)


@router.delete("/{user_id}/follow", response_model=UnfollowRead)
def unfollow(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    removed = unfollow_user(db, follower_id=current_user.id, user_id=user_id)
    if not removed:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not following this user")
    return UnfollowRead(removed=True)
