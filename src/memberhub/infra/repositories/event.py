"""SQLModel implementation of Event repository."""

from __future__ import annotations

import logging
from collections import defaultdict
from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy import func
from sqlmodel import Session, col, select

from ...constants import ActionType, EventType
from ...domain.records import (
    DivisionEventCount,
    EventCategory,
    EventDraft,
    EventRecord,
    MemberRecord,
    ParticipationCount,
    SocialAction,
    SocialActionListing,
    category_from_columns,
    validate_category,
)
from ...exceptions import DivisionNotFoundError, EventNotFoundError, InvalidEventCategoryError
from ...models.division import Division
from ...models.event import Event, EventPerson
from ...models.person import Person
from ..database import SessionFactory

logger = logging.getLogger("memberhub.repositories.event")


def _participant_map(
    session: Session, event_ids: list[int], member_ids: Optional[set[int]] = None
) -> dict[int, set[int]]:
    """Return ``event_id -> participant ids`` for the given events."""

    participants: dict[int, set[int]] = defaultdict(set)
    if not event_ids:
        return participants
    statement = select(EventPerson).where(col(EventPerson.event_id).in_(event_ids))
    if member_ids is not None:
        statement = statement.where(col(EventPerson.person_id).in_(member_ids))
    for link in session.exec(statement).all():
        participants[link.event_id].add(link.person_id)
    return participants


def _stored_category(row: Event) -> Optional[EventCategory]:
    """Category of a stored row, or ``None`` when its event type is unknown."""

    try:
        return category_from_columns(row.event_type, row.action_type, strict=False)
    except InvalidEventCategoryError:
        logger.warning("Skipping event %s with unknown event type %r", row.id, row.event_type)
        return None


def _known_action_type(value: Optional[str]) -> Optional[ActionType]:
    try:
        return ActionType(value) if value else None
    except ValueError:
        return None


def _to_record(
    row: Event, category: EventCategory, participant_ids: Iterable[int] = ()
) -> EventRecord:
    return EventRecord(
        id=row.id,
        title=row.title,
        date=row.date,
        category=category,
        participant_ids=frozenset(participant_ids),
    )


class SQLModelEventRepository:
    """SQLModel-based event repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def find_events(
        self,
        division_id: int,
        start: datetime,
        end: datetime,
        *,
        member_ids: Optional[Iterable[int]] = None,
    ) -> list[EventRecord]:
        """List events of a division dated within ``[start, end]``, oldest first.

        Social actions stored without a usable action type are still returned,
        as ``SocialAction(None)``. Rows with an unknown event type are skipped.
        """
        allowed = set(member_ids) if member_ids is not None else None
        with self.session_factory() as session:
            statement = (
                select(Event)
                .where(Event.division_id == division_id)
                .where(col(Event.date) >= start)
                .where(col(Event.date) <= end)
                .order_by(col(Event.date), col(Event.id))
            )
            rows = list(session.exec(statement).all())
            participants = _participant_map(session, [row.id for row in rows], allowed)
            records = []
            for row in rows:
                category = _stored_category(row)
                if category is not None:
                    records.append(_to_record(row, category, participants.get(row.id, ())))

        logger.debug(
            "Loaded %d events for division %s between %s and %s",
            len(records),
            division_id,
            start.isoformat(),
            end.isoformat(),
        )
        return records

    def find_social_actions(
        self,
        *,
        regional_id: Optional[int] = None,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> list[SocialActionListing]:
        """List social actions newest first, optionally scoped to a regional and window."""
        with self.session_factory() as session:
            statement = (
                select(Event, Division)
                .join(Division, col(Event.division_id) == col(Division.id))
                .where(Event.event_type == EventType.SOCIAL_ACTION.value)
                .order_by(col(Event.date).desc(), col(Event.id).desc())
            )
            if regional_id is not None:
                statement = statement.where(Division.regional_id == regional_id)
            if start is not None:
                statement = statement.where(col(Event.date) >= start)
            if end is not None:
                statement = statement.where(col(Event.date) <= end)

            rows = list(session.exec(statement).all())
            event_ids = [event.id for event, _ in rows]

            people: dict[int, list[MemberRecord]] = defaultdict(list)
            if event_ids:
                link_statement = (
                    select(EventPerson, Person)
                    .join(Person, col(EventPerson.person_id) == col(Person.id))
                    .where(col(EventPerson.event_id).in_(event_ids))
                    .order_by(col(Person.id))
                )
                for link, person in session.exec(link_statement).all():
                    people[link.event_id].append(
                        MemberRecord(
                            id=person.id,
                            full_name=person.full_name,
                            short_name=person.short_name,
                            hierarchy_level=person.hierarchy_level,
                        )
                    )

            listings: list[SocialActionListing] = []
            for event, division in rows:
                action_type = _known_action_type(event.action_type)
                if action_type is None:
                    # legacy rows created before the action type column existed
                    continue
                listings.append(
                    SocialActionListing(
                        id=event.id,
                        title=event.title,
                        date=event.date,
                        action_type=action_type,
                        division_id=division.id,
                        division_name=division.name,
                        participants=tuple(people.get(event.id, ())),
                    )
                )
            return listings

    def count_events(
        self,
        regional_id: int,
        start: datetime,
        end: datetime,
        *,
        by_action_type: bool = False,
    ) -> list[DivisionEventCount]:
        """Count events per division of a regional dated within ``[start, end]``."""
        with self.session_factory() as session:
            columns = [col(Event.division_id), func.count(col(Event.id))]
            group = [col(Event.division_id)]
            if by_action_type:
                columns.insert(1, col(Event.action_type))
                group.append(col(Event.action_type))
            statement = (
                select(*columns)
                .join(Division, col(Event.division_id) == col(Division.id))
                .where(Division.regional_id == regional_id)
                .where(col(Event.date) >= start)
                .where(col(Event.date) <= end)
                .group_by(*group)
            )
            if by_action_type:
                statement = statement.where(Event.event_type == EventType.SOCIAL_ACTION.value)
            rows = list(session.exec(statement).all())

        if not by_action_type:
            return [DivisionEventCount(division_id, count) for division_id, count in rows]

        counts: list[DivisionEventCount] = []
        for division_id, raw_action_type, count in rows:
            action_type = _known_action_type(raw_action_type)
            if action_type is not None:
                counts.append(DivisionEventCount(division_id, count, action_type))
        return counts

    def count_participations(
        self, division_id: int, start: datetime, end: datetime
    ) -> list[ParticipationCount]:
        """Count the division's events each participant joined within ``[start, end]``."""
        with self.session_factory() as session:
            statement = (
                select(
                    col(Person.id),
                    col(Person.short_name),
                    col(Division.name),
                    func.count(col(Event.id)),
                )
                .join(EventPerson, col(EventPerson.person_id) == col(Person.id))
                .join(Event, col(Event.id) == col(EventPerson.event_id))
                .join(Division, col(Division.id) == col(Event.division_id))
                .where(Division.id == division_id)
                .where(col(Event.date) >= start)
                .where(col(Event.date) <= end)
                .group_by(col(Person.id), col(Person.short_name), col(Division.name))
                .order_by(col(Person.id))
            )
            return [
                ParticipationCount(
                    person_id=person_id,
                    short_name=short_name,
                    division_name=division_name,
                    count=count,
                )
                for person_id, short_name, division_name, count in session.exec(statement).all()
            ]

    def create_event(self, draft: EventDraft) -> EventRecord:
        """Create a new event.

        Raises:
            InvalidEventCategoryError: a social action without its action type.
            DivisionNotFoundError: the draft's division does not exist.
        """
        category = validate_category(draft.category)
        with self.session_factory() as session:
            if session.get(Division, draft.division_id) is None:
                raise DivisionNotFoundError(draft.division_id)

            action_type = (
                category.action_type.value if isinstance(category, SocialAction) else None
            )
            row = Event(
                title=draft.title,
                date=draft.date,
                description=draft.description,
                division_id=draft.division_id,
                event_type=category.event_type.value,
                action_type=action_type,
            )
            session.add(row)
            session.commit()
            session.refresh(row)
            logger.info("Created event %s in division %s", row.id, row.division_id)
            return _to_record(row, category)

    def set_participants(self, event_id: int, person_ids: Iterable[int]) -> EventRecord:
        """Replace the participant set of an event."""
        unique_ids = sorted(set(person_ids))
        with self.session_factory() as session:
            row = session.get(Event, event_id)
            if row is None:
                raise EventNotFoundError(event_id)

            existing = session.exec(select(EventPerson).where(EventPerson.event_id == event_id)).all()
            for link in existing:
                session.delete(link)
            session.flush()
            for person_id in unique_ids:
                session.add(EventPerson(event_id=event_id, person_id=person_id))
            session.commit()
            session.refresh(row)
            return _to_record(
                row, category_from_columns(row.event_type, row.action_type, strict=False), unique_ids
            )
