"""Error taxonomy shared by the interaction ledger use cases."""

from __future__ import annotations


class LedgerError(Exception):
    """Base class for errors raised by interaction and notification use cases."""


class NotFoundError(LedgerError, LookupError):
    """A referenced user or entity does not exist."""


class ForbiddenError(LedgerError, PermissionError):
    """The requestor does not own the resource it tried to act upon."""


class ConflictError(LedgerError):
    """A unique interaction already exists for the same actor and target."""

    def __init__(self, dedupe_key: str) -> None:
        super().__init__(f"Interaction '{dedupe_key}' already recorded")
        self.dedupe_key = dedupe_key


class UnknownNotificationTypeError(LedgerError, RuntimeError):
    """No template is registered for a notification type.

    Raised only when the template table and the type enum disagree, which is a
    programming error rather than a recoverable condition.
    """

    def __init__(self, notification_type: object) -> None:
        super().__init__(f"No notification template registered for {notification_type!r}")
        self.notification_type = notification_type


__all__ = [
    "LedgerError",
    "NotFoundError",
    "ForbiddenError",
    "ConflictError",
    "UnknownNotificationTypeError",
]
