"""Event classification values."""

from __future__ import annotations

from enum import Enum


class EventType(str, Enum):
    """Closed set of event categories."""

    SOCIAL_ACTION = "social_action"
    POLL = "poll"
    OTHER = "other"


class ActionType(str, Enum):
    """Sub-classification carried only by social-action events."""

    INTERNAL = "internal"
    EXTERNAL = "external"
    FUNDRAISING = "fundraising"


__all__ = ["ActionType", "EventType"]
