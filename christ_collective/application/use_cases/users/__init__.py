"""Use cases for managing users."""

from .authenticate_user import (
    AuthenticationResult,
    AuthenticationStatus,
    authenticate_user,
)
from .create_user import create_user
from .get_user import get_user
from .update_profile import update_profile

__all__ = [
    "AuthenticationResult",
    "AuthenticationStatus",
    "authenticate_user",
    "create_user",
    "get_user",
    "update_profile",
]
