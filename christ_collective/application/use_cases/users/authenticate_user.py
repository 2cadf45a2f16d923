"""Credential check behind the token endpoint."""

from dataclasses import dataclass
from enum import Enum, auto

from sqlalchemy.orm import Session

from christ_collective.domain.entities import User
from christ_collective.infrastructure.repositories import UserRepository
from christ_collective.infrastructure.security import verify_password


class AuthenticationStatus(Enum):
    SUCCESS = auto()
    INVALID_CREDENTIALS = auto()
    INACTIVE = auto()


@dataclass(frozen=True)
class AuthenticationResult:
    status: AuthenticationStatus
    user: User | None = None


def authenticate_user(session: Session, email: str, password: str) -> AuthenticationResult:
    """Check an email/password pair.

    Unknown emails and wrong passwords share one status so the response does not
    reveal which accounts exist.
    """

    user = UserRepository(session).get_by_email(email)
    if user is None or not verify_password(password, user.password):
        return AuthenticationResult(AuthenticationStatus.INVALID_CREDENTIALS)
    if not user.is_active:
        return AuthenticationResult(AuthenticationStatus.INACTIVE, user)
    return AuthenticationResult(AuthenticationStatus.SUCCESS, user)
