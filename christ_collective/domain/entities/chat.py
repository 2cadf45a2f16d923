"""Domain entity representing a direct chat between two users."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Chat:
    id: int | None
    user_a_id: int
    user_b_id: int
    created_at: datetime | None = None

    def has_participant(self, user_id: int) -> bool:
        return user_id in (self.user_a_id, self.user_b_id)

    def other_participant(self, user_id: int) -> int:
        """Return the participant that is not ``user_id``."""

        return self.user_b_id if user_id == self.user_a_id else self.user_a_id


__all__ = ["Chat"]
