"""Use case for retrieving a single user."""

from sqlalchemy.orm import Session

from christ_collective.domain.entities import User
from christ_collective.domain.errors import NotFoundError
from christ_collective.infrastructure.repositories import UserRepository


def get_user(session: Session, user_id: int, *, include_inactive: bool = False) -> User:
    """Return the requested user or raise an error if it does not exist."""

    repository = UserRepository(session)
    user = repository.get(user_id)
    if user is None:
        raise NotFoundError("User not found")
    if not include_inactive and not user.is_active:
        raise NotFoundError("User not found")
    return user
