"""Domain entity representing a platform post."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Post:
    """A feed post written by a user, optionally on behalf of a ministry."""

    id: int | None
    user_id: int
    title: str
    content: str
    ministry_id: int | None = None
    created_at: datetime | None = None


__all__ = ["Post"]
