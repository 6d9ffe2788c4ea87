"""Demo data for local development."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import func
from sqlmodel import select

from ..constants import ActionType, HierarchyLevel
from ..domain.records import EventDraft, OtherActivity, Poll, SocialAction
from ..infra.database import SessionFactory
from ..infra.repositories import SQLModelEventRepository, SQLModelLatePaymentRepository
from ..models import Command, Division, Event, LatePayment, Person, Regional

logger = logging.getLogger("memberhub.services.seed")

DEMO_DIVISION_NAME = "Divisão Centro"

_DEMO_MEMBERS = (
    ("Ângela Maria Souza", "Ângela", HierarchyLevel.FULL),
    ("Bruno Carvalho Lima", "Bruno", HierarchyLevel.DIRETOR),
    ("Ana Paula Ribeiro", "Ana", HierarchyLevel.PP),
    ("Édson Tavares", "Édson", HierarchyLevel.CAMISETA),
)


@dataclass(slots=True)
class SeedSummary:
    divisions: int
    persons: int
    events: int
    late_payments: int


def _summary(session) -> SeedSummary:
    def count(model) -> int:
        return int(session.exec(select(func.count()).select_from(model)).one())

    return SeedSummary(
        divisions=count(Division),
        persons=count(Person),
        events=count(Event),
        late_payments=count(LatePayment),
    )


def run_demo_seed(session_factory: SessionFactory, *, force: bool = False) -> SeedSummary:
    """Insert a command, regional, division, members, events and a late payment.

    Skips everything when the demo division already exists unless ``force`` is
    set, in which case only a new batch of events is added.
    """

    with session_factory() as session:
        division = session.exec(
            select(Division).where(Division.name == DEMO_DIVISION_NAME)
        ).first()
        if division is not None and not force:
            return _summary(session)

        created = division is None
        if created:
            command = Command(number=1, name="Primeiro Comando")
            session.add(command)
            session.flush()
            regional = Regional(name="Regional Sudeste", command_id=command.id)
            session.add(regional)
            session.flush()
            division = Division(name=DEMO_DIVISION_NAME, regional_id=regional.id)
            session.add(division)
            session.flush()
            for full_name, short_name, level in _DEMO_MEMBERS:
                session.add(
                    Person(
                        full_name=full_name,
                        short_name=short_name,
                        division_id=division.id,
                        hierarchy_level=level.value,
                    )
                )
            session.add(
                Person(
                    full_name="Carlos Inativo",
                    short_name="Carlos",
                    division_id=division.id,
                    is_active=False,
                )
            )
            session.commit()

        division_id = division.id
        people = {
            person.short_name: person.id
            for person in session.exec(select(Person).where(Person.division_id == division_id))
        }

    events = SQLModelEventRepository(session_factory)
    payments = SQLModelLatePaymentRepository(session_factory)

    drafts = (
        (
            EventDraft("Arrecadação de agasalhos", datetime(2025, 6, 7, 9), division_id,
                       SocialAction(ActionType.FUNDRAISING)),
            ("Ângela", "Ana"),
        ),
        (
            EventDraft("Visita ao abrigo", datetime(2025, 6, 21, 14), division_id,
                       SocialAction(ActionType.EXTERNAL)),
            ("Ângela", "Bruno"),
        ),
        (EventDraft("Eleição da diretoria", datetime(2025, 7, 5, 19), division_id, Poll()),
         ("Bruno", "Édson", "Ana")),
        (EventDraft("Churrasco de integração", datetime(2025, 7, 26, 12), division_id,
                    OtherActivity()),
         ("Ana",)),
    )
    for draft, attendees in drafts:
        event = events.create_event(draft)
        events.set_participants(event.id, [people[name] for name in attendees])

    if created:
        payments.record_late_payment(people["Bruno"], 2025, 6, notes="Pago com atraso")

    with session_factory() as session:
        summary = _summary(session)
    logger.info("Demo seed completed", extra={"summary": summary})
    return summary


__all__ = ["DEMO_DIVISION_NAME", "SeedSummary", "run_demo_seed"]
