"""SQLModel implementation of LatePayment repository."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Optional

from sqlalchemy import tuple_
from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select

from ...domain.records import LatePaymentRecord, ScorePeriod
from ...exceptions import LatePaymentAlreadyExistsError
from ...models.late_payment import LatePayment
from ..database import SessionFactory

logger = logging.getLogger("memberhub.repositories.late_payment")


def _to_record(row: LatePayment) -> LatePaymentRecord:
    return LatePaymentRecord(
        id=row.id,
        person_id=row.person_id,
        year=row.year,
        month=row.month,
        paid_at=row.paid_at,
        notes=row.notes,
    )


class SQLModelLatePaymentRepository:
    """SQLModel-based payment compliance provider."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def find_late_payments(
        self, member_ids: Iterable[int], periods: Iterable[ScorePeriod]
    ) -> list[LatePaymentRecord]:
        """List late payments for ``member_ids`` x ``periods``."""
        ids = sorted(set(member_ids))
        wanted = sorted(set(periods))
        if not ids or not wanted:
            return []

        period_clause = tuple_(col(LatePayment.year), col(LatePayment.month)).in_(
            [(period.year, period.month) for period in wanted]
        )
        with self.session_factory() as session:
            statement = (
                select(LatePayment)
                .where(col(LatePayment.person_id).in_(ids))
                .where(period_clause)
                .order_by(col(LatePayment.person_id), col(LatePayment.year), col(LatePayment.month))
            )
            records = [_to_record(row) for row in session.exec(statement).all()]

        logger.debug(
            "Loaded %d late payments for %d members over %d periods",
            len(records),
            len(ids),
            len(wanted),
        )
        return records

    def record_late_payment(
        self,
        person_id: int,
        year: int,
        month: int,
        *,
        paid_at: Optional[datetime] = None,
        notes: Optional[str] = None,
    ) -> LatePaymentRecord:
        """Record a late payment for a member and period."""
        with self.session_factory() as session:
            existing = session.exec(
                select(LatePayment)
                .where(LatePayment.person_id == person_id)
                .where(LatePayment.year == year)
                .where(LatePayment.month == month)
            ).first()
            if existing is not None:
                raise LatePaymentAlreadyExistsError(person_id, year, month)

            row = LatePayment(
                person_id=person_id, year=year, month=month, paid_at=paid_at, notes=notes
            )
            session.add(row)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise LatePaymentAlreadyExistsError(person_id, year, month) from exc
            session.refresh(row)
            return _to_record(row)
