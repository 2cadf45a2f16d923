"""Aggregate application use cases."""

from .fanout import InteractionOutcome, record_and_notify
from .users import authenticate_user, create_user

__all__ = [
    "InteractionOutcome",
    "authenticate_user",
    "create_user",
    "record_and_notify",
]
