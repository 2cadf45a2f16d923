"""Interaction recorder use cases."""

from .record_interaction import record_interaction
from .remove_interaction import remove_interaction
from .self_action import should_notify
from .targets import ResolvedTarget, resolve_target

__all__ = [
    "ResolvedTarget",
    "record_interaction",
    "remove_interaction",
    "resolve_target",
    "should_notify",
]
