"""Use case for registering users."""

from sqlalchemy.orm import Session

from christ_collective.domain.entities import User
from christ_collective.infrastructure.repositories import UserRepository
from christ_collective.infrastructure.security import get_password_hash
from christ_collective.utils import now_in_app_naive_datetime


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    profile_image_url: str | None = None,
) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)

    if repository.get_by_email(email):
        msg = "Email address is already registered"
        raise ValueError(msg)

    user = User(
        id=None,
        name=name.strip(),
        email=email,
        password=get_password_hash(password),
        profile_image_url=profile_image_url,
        is_active=True,
        created_at=now_in_app_naive_datetime(),
    )
    return repository.create(user)
