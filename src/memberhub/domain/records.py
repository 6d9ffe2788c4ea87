"""Flat, immutable records exchanged between repositories and services.

Repositories convert ORM rows into these structures so that the scoring code
never touches a live session or lazy relationship.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, NamedTuple, Optional

from ..constants import ActionType, EventType
from ..exceptions import InvalidEventCategoryError


@dataclass(frozen=True, slots=True)
class DivisionRecord:
    id: int
    name: str
    regional_id: int


@dataclass(frozen=True, slots=True)
class DivisionFound:
    """Lookup outcome carrying the resolved division."""

    division: DivisionRecord


@dataclass(frozen=True, slots=True)
class DivisionNotFound:
    """Lookup outcome for an id that matches no division."""

    division_id: int


DivisionLookup = DivisionFound | DivisionNotFound


@dataclass(frozen=True, slots=True)
class MemberRecord:
    """Active member as returned by the roster provider."""

    id: int
    full_name: str
    short_name: str
    hierarchy_level: Optional[str] = None


# Event categories ---------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SocialAction:
    event_type: ClassVar[EventType] = EventType.SOCIAL_ACTION

    # None only for stored rows that predate the sub-category
    action_type: Optional[ActionType] = None


@dataclass(frozen=True, slots=True)
class Poll:
    event_type: ClassVar[EventType] = EventType.POLL


@dataclass(frozen=True, slots=True)
class OtherActivity:
    event_type: ClassVar[EventType] = EventType.OTHER


EventCategory = SocialAction | Poll | OtherActivity


def validate_category(category: EventCategory) -> EventCategory:
    """Reject a social action without a sub-category on write paths."""

    if isinstance(category, SocialAction) and category.action_type is None:
        raise InvalidEventCategoryError("Social actions require an action type")
    return category


def category_from_columns(
    event_type: str, action_type: str | None = None, *, strict: bool = True
) -> EventCategory:
    """Build the category variant for stored ``event_type``/``action_type`` columns.

    With ``strict=False`` (reading rows back) a social action whose sub-category
    is missing or unrecognised becomes ``SocialAction(None)`` and a stray
    sub-category on a poll or other activity is ignored. An unknown
    ``event_type`` is rejected in both modes.

    Raises:
        InvalidEventCategoryError: unknown values, a social action without its
            sub-category, or a sub-category on any other kind of event.
    """

    try:
        kind = EventType(event_type)
    except ValueError as exc:
        raise InvalidEventCategoryError(f"Unknown event type {event_type!r}") from exc

    if kind is EventType.SOCIAL_ACTION:
        if not action_type:
            if not strict:
                return SocialAction()
            raise InvalidEventCategoryError("Social actions require an action type")
        try:
            return SocialAction(ActionType(action_type))
        except ValueError as exc:
            if not strict:
                return SocialAction()
            raise InvalidEventCategoryError(f"Unknown action type {action_type!r}") from exc

    if action_type and strict:
        raise InvalidEventCategoryError("Action type is only valid for social actions")
    return Poll() if kind is EventType.POLL else OtherActivity()


@dataclass(frozen=True, slots=True)
class EventRecord:
    """An event in the scoring window with its participant ids."""

    id: int
    title: str
    date: datetime
    category: EventCategory
    participant_ids: frozenset[int] = field(default_factory=frozenset)

    @property
    def event_type(self) -> EventType:
        return self.category.event_type


@dataclass(frozen=True, slots=True)
class EventDraft:
    """Input for creating an event."""

    title: str
    date: datetime
    division_id: int
    category: EventCategory
    description: str = ""


@dataclass(frozen=True, slots=True)
class SocialActionListing:
    """Social action with division and participant details for the listing report."""

    id: int
    title: str
    date: datetime
    action_type: ActionType
    division_id: int
    division_name: str
    participants: tuple[MemberRecord, ...] = ()


@dataclass(frozen=True, slots=True)
class LatePaymentRecord:
    id: int
    person_id: int
    year: int
    month: int
    paid_at: Optional[datetime] = None
    notes: Optional[str] = None

    @property
    def period(self) -> "ScorePeriod":
        return ScorePeriod(self.year, self.month)


class ScorePeriod(NamedTuple):
    """A (year, month) pair; compares lexicographically like a tuple."""

    year: int
    month: int

    def next(self) -> "ScorePeriod":
        """Return the following calendar month, rolling December into January."""
        if self.month == 12:
            return ScorePeriod(self.year + 1, 1)
        return ScorePeriod(self.year, self.month + 1)


@dataclass(frozen=True, slots=True)
class DivisionEventCount:
    """Number of events a division held in a window, optionally per action type."""

    division_id: int
    count: int
    action_type: Optional[ActionType] = None


@dataclass(frozen=True, slots=True)
class ParticipationCount:
    """How many events of a division one person took part in."""

    person_id: int
    short_name: str
    division_name: str
    count: int
