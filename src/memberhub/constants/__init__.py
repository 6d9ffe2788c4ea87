"""Shared enumerations."""

from .members import HierarchyLevel
from .events import ActionType, EventType

__all__ = ["ActionType", "EventType", "HierarchyLevel"]
