"""Social actions grouped by division and action type."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from ..constants import ActionType
from ..domain.repositories import EventRepository


def generate_division_report(
    events: EventRepository,
    *,
    regional_id: Optional[int] = None,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> list[dict[str, Any]]:
    """List social actions per division, newest first within each bucket.

    Divisions appear in the order their most recent action was found.
    """

    by_division: dict[int, dict[str, Any]] = {}
    for action in events.find_social_actions(regional_id=regional_id, start=start, end=end):
        entry = by_division.get(action.division_id)
        if entry is None:
            entry = {
                "divisionId": action.division_id,
                "divisionName": action.division_name,
                "socialActions": {action_type.value: [] for action_type in ActionType},
            }
            by_division[action.division_id] = entry

        entry["socialActions"][action.action_type.value].append(
            {
                "id": action.id,
                "name": action.title,
                "date": action.date.isoformat(),
                "participants": [
                    {
                        "id": person.id,
                        "shortName": person.short_name,
                        "hierarchyLevel": person.hierarchy_level,
                    }
                    for person in action.participants
                ],
            }
        )

    return list(by_division.values())


__all__ = ["generate_division_report"]
