"""Domain entity representing a donation campaign."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Campaign:
    id: int | None
    user_id: int
    title: str
    slug: str
    is_active: bool = True
    created_at: datetime | None = None


__all__ = ["Campaign"]
