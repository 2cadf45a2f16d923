"""Use case for updating the public profile of a user."""

from dataclasses import replace

from sqlalchemy.orm import Session

from christ_collective.domain.entities import User
from christ_collective.infrastructure.repositories import UserRepository

from .get_user import get_user


def update_profile(
    session: Session,
    user_id: int,
    *,
    name: str | None = None,
    profile_image_url: str | None = None,
) -> User:
    """Update display fields of ``user_id``.

    Notifications created earlier keep the name and image they were created
    with.
    """

    user = get_user(session, user_id)
    updated = replace(
        user,
        name=name.strip() if name is not None else user.name,
        profile_image_url=(
            profile_image_url if profile_image_url is not None else user.profile_image_url
        ),
    )
    return UserRepository(session).update(updated)
