"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Core attributes describing a platform member."""

    id: int | None
    name: str
    email: str
    password: str
    profile_image_url: str | None
    is_active: bool
    created_at: datetime | None
    updated_at: datetime | None = None


__all__ = ["User"]
