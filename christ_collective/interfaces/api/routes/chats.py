"""Routes for direct chats."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from christ_collective.application.use_cases.feed import (
    list_messages as list_messages_uc,
    open_chat as open_chat_uc,
    send_message as send_message_uc,
)
from christ_collective.domain.entities import User
from christ_collective.domain.errors import LedgerError
from christ_collective.infrastructure.database import get_db
from christ_collective.interfaces.api.dependencies import get_current_active_user
from christ_collective.interfaces.api.routes_helpers import bad_request, http_error_from
from christ_collective.interfaces.api.schemas import (
    ChatCreate,
    ChatRead,
    ContentCreate,
    InteractionOutcomeRead,
    InteractionRead,
)

from .serializers import interaction_to_schema, outcome_to_schema

router = APIRouter(prefix="/chats", tags=["chats"])


@router.post("/", response_model=ChatRead)
def open_chat(
    chat_in: ChatCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    """Return the direct chat with ``other_user_id``, creating it if needed."""

    try:
        chat = open_chat_uc(db, user_id=current_user.id, other_user_id=chat_in.other_user_id)
    except LedgerError as exc:
        raise http_error_from(exc) from exc
    except ValueError as exc:
        raise bad_request(exc) from exc
    return ChatRead.model_validate(chat)


@router.post(
    "/{chat_id}/messages",
    response_model=InteractionOutcomeRead,
    status_code=status.HTTP_201_CREATED,
)
def send_message(
    chat_id: int,
    message_in: ContentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        outcome = send_message_uc(
            db, user_id=current_user.id, chat_id=chat_id, content=message_in.content
        )
    except LedgerError as exc:
        raise http_error_from(exc) from exc
    except ValueError as exc:
        raise bad_request(exc) from exc
    return outcome_to_schema(outcome)


@router.get("/{chat_id}/messages", response_model=list[InteractionRead])
def list_messages(
    chat_id: int,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
):
    try:
        messages = list_messages_uc(
            db, user_id=current_user.id, chat_id=chat_id, skip=skip, limit=limit
        )
    except LedgerError as exc:
        raise http_error_from(exc) from exc
    return [interaction_to_schema(message) for message in messages]
