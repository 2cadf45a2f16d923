"""Routes for platform posts, likes and comments."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from christ_collective.application.use_cases.feed import (
    add_comment,
    create_post as create_post_uc,
    get_post,
    list_comments as list_comments_uc,
    toggle_like,
)
from christ_collective.domain.entities import User
from christ_collective.domain.errors import LedgerError
from christ_collective.infrastructure.database import get_db
from christ_collective.interfaces.api.dependencies import get_current_active_user
from christ_collective.interfaces.api.routes_helpers import bad_request, http_error_from
from christ_collective.interfaces.api.schemas import (
    ContentCreate,
    InteractionOutcomeRead,
    InteractionRead,
    LikeToggleRead,
    PostCreate,
    PostRead,
)

from .serializers import interaction_to_schema, outcome_to_schema

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("/", response_model=PostRead, status_code=status.HTTP_201_CREATED)
def create_post(
    post_in: PostCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Publish a post; followers of the author are notified."""

    post = create_post_uc(
        db, author_id=current_user.id, title=post_in.title, content=post_in.content
    )
    return PostRead.model_validate(post)


@router.get("/{post_id}", response_model=PostRead)
def read_post(
    post_id: int,
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    try:
        post = get_post(db, post_id)
    except LedgerError as exc:
        raise http_error_from(exc) from exc
    return PostRead.model_validate(post)


@router.post("/{post_id}/like", response_model=LikeToggleRead)
def like_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Toggle the authenticated user's like on ``post_id``."""

    try:
        result = toggle_like(db, user_id=current_user.id, post_id=post_id)
    except LedgerError as exc:
        raise http_error_from(exc) from exc
    return LikeToggleRead(liked=result.liked, likes_count=result.likes_count)


@router.post(
    "/{post_id}/comment",
    response_model=InteractionOutcomeRead,
    status_code=status.HTTP_201_CREATED,
)
def comment_on_post(
    post_id: int,
    comment_in: ContentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        outcome = add_comment(
            db, user_id=current_user.id, post_id=post_id, content=comment_in.content
        )
    except LedgerError as exc:
        raise http_error_from(exc) from exc
    except ValueError as exc:
        raise bad_request(exc) from exc
    return outcome_to_schema(outcome)


@router.get("/{post_id}/comments", response_model=list[InteractionRead])
def list_comments(
    post_id: int,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
    _: User = Depends(get_current_active_user),
):
    try:
        comments = list_comments_uc(db, post_id, skip=skip, limit=limit)
    except LedgerError as exc:
        raise http_error_from(exc) from exc
    return [interaction_to_schema(comment) for comment in comments]
