"""Event repository protocol."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Protocol

from ..records import (
    DivisionEventCount,
    EventDraft,
    EventRecord,
    ParticipationCount,
    SocialActionListing,
)


class EventRepository(Protocol):
    """Event participation provider."""

    def find_events(
        self,
        division_id: int,
        start: datetime,
        end: datetime,
        *,
        member_ids: Optional[Iterable[int]] = None,
    ) -> list[EventRecord]:
        """Return events dated within ``[start, end]``, oldest first.

        When ``member_ids`` is given, participant sets only contain those ids.
        """
        ...

    def find_social_actions(
        self,
        *,
        regional_id: Optional[int] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[SocialActionListing]:
        """Return social actions, newest first, with division and participants."""
        ...

    def count_events(
        self,
        regional_id: int,
        start: datetime,
        end: datetime,
        *,
        by_action_type: bool = False,
    ) -> list[DivisionEventCount]:
        """Count events per division of a regional within ``[start, end]``.

        Divisions without events are absent. With ``by_action_type`` the counts
        are split per social-action sub-category and other events are left out.
        """
        ...

    def count_participations(
        self, division_id: int, start: datetime, end: datetime
    ) -> list[ParticipationCount]:
        """Count, per person, the division's events within ``[start, end]`` they joined."""
        ...

    def create_event(self, draft: EventDraft) -> EventRecord:
        """Persist a new event."""
        ...

    def set_participants(self, event_id: int, person_ids: Iterable[int]) -> EventRecord:
        """Replace the participant set of an event."""
        ...
