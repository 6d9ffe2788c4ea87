"""Graduation score report for a division over a date window."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable

from ..domain.records import (
    DivisionFound,
    DivisionLookup,
    DivisionNotFound,
    LatePaymentRecord,
)
from ..domain.repositories import (
    DivisionRepository,
    EventRepository,
    LatePaymentRepository,
    PersonRepository,
)
from .collation import collation_key
from .periods import enumerate_periods
from .scoring import MemberScore, score_member

logger = logging.getLogger("memberhub.services.graduation")

DEFAULT_LOCALE = "pt-BR"


def _echo(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return value


@dataclass(frozen=True, slots=True)
class GraduationReport:
    """Scores of every active member, ordered by short name."""

    start: Any
    end: Any
    data: tuple[MemberScore, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "period": {"start": _echo(self.start), "end": _echo(self.end)},
            "data": [score.to_dict() for score in self.data],
        }


def resolve_division(repository: DivisionRepository, division_id: int) -> DivisionLookup:
    """Wrap the repository lookup in an explicit found/not-found outcome."""

    division = repository.find_division(division_id)
    if division is None:
        return DivisionNotFound(division_id)
    return DivisionFound(division)


def group_late_payments(
    records: Iterable[LatePaymentRecord],
) -> dict[int, list[LatePaymentRecord]]:
    """Map person id to that person's late payments, keeping input order."""

    grouped: dict[int, list[LatePaymentRecord]] = defaultdict(list)
    for record in records:
        grouped[record.person_id].append(record)
    return dict(grouped)


def generate_graduation_report(
    division_id: int,
    start: datetime,
    end: datetime,
    *,
    divisions: DivisionRepository,
    persons: PersonRepository,
    events: EventRepository,
    late_payments: LatePaymentRepository,
    locale: str = DEFAULT_LOCALE,
    period_start: Any = None,
    period_end: Any = None,
) -> GraduationReport | DivisionNotFound:
    """Build the graduation report of ``division_id`` for ``[start, end]``.

    ``period_start``/``period_end`` are echoed in the report instead of
    ``start``/``end`` when given, so callers can return the dates exactly as
    the client sent them. Repository errors propagate unchanged.
    """

    sort_key = collation_key(locale)
    echoed_start = start if period_start is None else period_start
    echoed_end = end if period_end is None else period_end

    lookup = resolve_division(divisions, division_id)
    if isinstance(lookup, DivisionNotFound):
        logger.warning("Graduation report requested for unknown division %s", division_id)
        return lookup

    roster = persons.find_active_members(division_id)
    if not roster:
        logger.info("Division %s has no active members", division_id)
        return GraduationReport(start=echoed_start, end=echoed_end)

    member_ids = [member.id for member in roster]
    periods = enumerate_periods(start, end)

    window_events = events.find_events(division_id, start, end, member_ids=member_ids)
    payments_by_member = group_late_payments(
        late_payments.find_late_payments(member_ids, periods)
    )

    scores = [
        score_member(member, window_events, payments_by_member.get(member.id, ()))
        for member in roster
    ]
    scores.sort(key=lambda score: sort_key(score.short_name))

    logger.info(
        "Graduation report generated",
        extra={
            "division_id": division_id,
            "members": len(scores),
            "events": len(window_events),
            "periods": len(periods),
        },
    )
    return GraduationReport(start=echoed_start, end=echoed_end, data=tuple(scores))


__all__ = [
    "DEFAULT_LOCALE",
    "GraduationReport",
    "generate_graduation_report",
    "group_late_payments",
    "resolve_division",
]
