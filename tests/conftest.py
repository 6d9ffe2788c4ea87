"""Pytest configuration and shared fixtures for MemberHub tests.

Provides an isolated SQLite database per test plus factories for the
organisational hierarchy, members, events and late payments.
"""

from __future__ import annotations

import tempfile
from datetime import datetime
from pathlib import Path
from typing import Iterable

import pytest
from sqlmodel import Session, SQLModel, create_engine

from memberhub.infra.database import create_session_factory
from memberhub.models import (
    Command,
    Division,
    Event,
    EventPerson,
    LatePayment,
    Person,
    Regional,
)

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """Session used by the factories to insert rows."""
    session = Session(db_engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching what the repositories receive in production."""
    return create_session_factory(db_engine)


@pytest.fixture
def app_env(tmp_path, monkeypatch):
    """Point configuration at throwaway locations."""
    monkeypatch.setenv("MEMBERHUB_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("MEMBERHUB_DEV_MODE", "true")
    monkeypatch.delenv("MEMBERHUB_TEST_DATABASE_URL", raising=False)
    monkeypatch.delenv("MEMBERHUB_COLLATION_LOCALE", raising=False)
    return tmp_path


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def regional(db_session) -> Regional:
    command = Command(number=7, name="Sétimo Comando")
    db_session.add(command)
    db_session.commit()
    row = Regional(name="Regional Teste", command_id=command.id)
    db_session.add(row)
    db_session.commit()
    db_session.refresh(row)
    return row


@pytest.fixture
def division_factory(db_session, regional):
    """Factory for creating divisions under the shared regional."""

    def _create_division(name: str = "Divisão Teste", regional_id: int | None = None) -> Division:
        division = Division(name=name, regional_id=regional_id or regional.id)
        db_session.add(division)
        db_session.commit()
        db_session.refresh(division)
        return division

    return _create_division


@pytest.fixture
def person_factory(db_session):
    """Factory for creating members.

    Returns:
        Callable: Function that creates and persists Person instances
    """

    def _create_person(
        division: Division,
        short_name: str,
        full_name: str | None = None,
        is_active: bool = True,
        hierarchy_level: str | None = None,
    ) -> Person:
        person = Person(
            full_name=full_name or f"{short_name} da Silva",
            short_name=short_name,
            division_id=division.id,
            is_active=is_active,
            hierarchy_level=hierarchy_level,
        )
        db_session.add(person)
        db_session.commit()
        db_session.refresh(person)
        return person

    return _create_person


@pytest.fixture
def event_factory(db_session):
    """Factory for creating events with their participants."""

    def _create_event(
        division: Division,
        occurred_at: datetime,
        event_type: str = "social_action",
        action_type: str | None = "internal",
        title: str = "Evento",
        participants: Iterable[Person] = (),
    ) -> Event:
        event = Event(
            title=title,
            date=occurred_at,
            division_id=division.id,
            event_type=event_type,
            action_type=action_type if event_type == "social_action" else None,
        )
        db_session.add(event)
        db_session.commit()
        db_session.refresh(event)
        for person in participants:
            db_session.add(EventPerson(event_id=event.id, person_id=person.id))
        db_session.commit()
        return event

    return _create_event


@pytest.fixture
def late_payment_factory(db_session):
    """Factory for creating late payment rows."""

    def _create_late_payment(
        person: Person,
        year: int,
        month: int,
        paid_at: datetime | None = None,
        notes: str | None = None,
    ) -> LatePayment:
        row = LatePayment(
            person_id=person.id, year=year, month=month, paid_at=paid_at, notes=notes
        )
        db_session.add(row)
        db_session.commit()
        db_session.refresh(row)
        return row

    return _create_late_payment
