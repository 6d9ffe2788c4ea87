"""Late payment repository protocol."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Protocol

from ..records import LatePaymentRecord, ScorePeriod


class LatePaymentRepository(Protocol):
    """Payment compliance provider."""

    def find_late_payments(
        self, member_ids: Iterable[int], periods: Iterable[ScorePeriod]
    ) -> list[LatePaymentRecord]:
        """Return late payments of the given members falling in the given periods."""
        ...

    def record_late_payment(
        self,
        person_id: int,
        year: int,
        month: int,
        *,
        paid_at: Optional[datetime] = None,
        notes: Optional[str] = None,
    ) -> LatePaymentRecord:
        """Record a late payment; at most one per (person, year, month)."""
        ...
