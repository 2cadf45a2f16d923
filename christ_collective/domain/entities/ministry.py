"""Domain entities for ministry profiles and their events."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Ministry:
    """Ministry profile owned by a single user account."""

    id: int | None
    user_id: int
    name: str
    logo: str | None = None
    created_at: datetime | None = None


@dataclass
class MinistryEvent:
    """Bible study, service or community event hosted by a ministry."""

    id: int | None
    ministry_id: int
    title: str
    start_date: datetime
    created_at: datetime | None = None


__all__ = ["Ministry", "MinistryEvent"]
