"""Self-action filter applied before notifications are derived."""


def should_notify(actor_id: int, target_owner_id: int) -> bool:
    """Return ``False`` when the actor acted on their own content."""

    return actor_id != target_owner_id


__all__ = ["should_notify"]
