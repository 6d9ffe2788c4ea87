"""SQLModel implementation of Division repository."""

from __future__ import annotations

from typing import Optional

from sqlmodel import col, select

from ...domain.records import DivisionRecord
from ...models.division import Division
from ..database import SessionFactory


def _to_record(row: Division) -> DivisionRecord:
    return DivisionRecord(id=row.id, name=row.name, regional_id=row.regional_id)


class SQLModelDivisionRepository:
    """SQLModel-based division repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def find_division(self, division_id: int) -> Optional[DivisionRecord]:
        """Retrieve a division by ID."""
        with self.session_factory() as session:
            row = session.get(Division, division_id)
            if row is None:
                return None
            return _to_record(row)

    def find_divisions(self, regional_id: int) -> list[DivisionRecord]:
        """List the divisions of a regional ordered by id."""
        with self.session_factory() as session:
            statement = (
                select(Division)
                .where(Division.regional_id == regional_id)
                .order_by(col(Division.id))
            )
            return [_to_record(row) for row in session.exec(statement).all()]
