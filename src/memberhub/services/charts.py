"""Event-count charts for a regional or a single division.

Every chart lists its bars in ascending value order; equal values fall back
to the collated name so the order is stable for pt-BR readers.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from ..constants import ActionType
from ..domain.repositories import DivisionRepository, EventRepository
from .collation import collation_key

logger = logging.getLogger("memberhub.services.charts")

DEFAULT_LOCALE = "pt-BR"

SERIES_LABELS: dict[ActionType, str] = {
    ActionType.INTERNAL: "Interna",
    ActionType.EXTERNAL: "Externa",
    ActionType.FUNDRAISING: "Arrecadação",
}


def event_count_chart(
    regional_id: int,
    start: datetime,
    end: datetime,
    *,
    divisions: DivisionRepository,
    events: EventRepository,
    locale: str = DEFAULT_LOCALE,
) -> list[dict[str, Any]]:
    """Events held by each division of a regional, including divisions with none."""

    sort_key = collation_key(locale)
    counts = {
        item.division_id: item.count for item in events.count_events(regional_id, start, end)
    }
    bars = [
        {"id": division.id, "name": division.name, "value": counts.get(division.id, 0)}
        for division in divisions.find_divisions(regional_id)
    ]
    bars.sort(key=lambda bar: (bar["value"], sort_key(bar["name"])))

    logger.debug("Event count chart for regional %s has %d divisions", regional_id, len(bars))
    return bars


def action_type_chart(
    regional_id: int,
    start: datetime,
    end: datetime,
    *,
    divisions: DivisionRepository,
    events: EventRepository,
    locale: str = DEFAULT_LOCALE,
) -> list[dict[str, Any]]:
    """Social actions of each division split into internal, external and fundraising."""

    sort_key = collation_key(locale)
    counts: dict[tuple[int, ActionType], int] = {
        (item.division_id, item.action_type): item.count
        for item in events.count_events(regional_id, start, end, by_action_type=True)
    }

    entries = []
    for division in divisions.find_divisions(regional_id):
        series = [
            {"name": label, "value": counts.get((division.id, action_type), 0)}
            for action_type, label in SERIES_LABELS.items()
        ]
        entries.append({"id": division.id, "name": division.name, "series": series})

    entries.sort(
        key=lambda entry: (
            sum(item["value"] for item in entry["series"]),
            sort_key(entry["name"]),
        )
    )
    return entries


def participation_chart(
    division_id: int,
    start: datetime,
    end: datetime,
    *,
    events: EventRepository,
    locale: str = DEFAULT_LOCALE,
) -> list[dict[str, Any]]:
    """Number of the division's events each participant joined.

    People who joined nothing in the window are not listed.
    """

    sort_key = collation_key(locale)
    rows = events.count_participations(division_id, start, end)
    ordered = sorted(rows, key=lambda row: (row.count, sort_key(row.short_name)))
    return [
        {
            "personId": row.person_id,
            "name": row.short_name,
            "divisionName": row.division_name,
            "value": row.count,
        }
        for row in ordered
    ]


__all__ = [
    "SERIES_LABELS",
    "action_type_chart",
    "event_count_chart",
    "participation_chart",
]
