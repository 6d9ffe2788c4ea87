"""SQLModel implementation of Person repository."""

from __future__ import annotations

import logging

from sqlmodel import col, select

from ...domain.records import MemberRecord
from ...models.person import Person
from ..database import SessionFactory

logger = logging.getLogger("memberhub.repositories.person")


class SQLModelPersonRepository:
    """SQLModel-based roster provider."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def find_active_members(self, division_id: int) -> list[MemberRecord]:
        """List active members of a division."""
        with self.session_factory() as session:
            statement = (
                select(Person)
                .where(Person.division_id == division_id)
                .where(Person.is_active == True)  # noqa: E712
                .order_by(col(Person.id))
            )
            members = [
                MemberRecord(
                    id=row.id,
                    full_name=row.full_name,
                    short_name=row.short_name,
                    hierarchy_level=row.hierarchy_level,
                )
                for row in session.exec(statement).all()
            ]
        logger.debug("Loaded %d active members for division %s", len(members), division_id)
        return members
