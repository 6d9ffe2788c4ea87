"""Per-member graduation score.

Four binary criteria are evaluated over the reporting window:

* ``socialAction`` - took part in at least one social action
* ``poll`` - took part in at least one poll
* ``otherEvents`` - took part in at least one other activity
* ``payments`` - has no late payment recorded in the window

The total is their sum, so it always lies between 0 and 4. Participation is a
flag, not a count: five social actions score the same as one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from ..constants import EventType
from ..domain.records import EventRecord, LatePaymentRecord, MemberRecord


def _isoformat(value) -> str | None:
    return value.isoformat() if value is not None else None


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    social_action: int = 0
    poll: int = 0
    other_events: int = 0
    payments: int = 0

    @property
    def total(self) -> int:
        return self.social_action + self.poll + self.other_events + self.payments

    def to_dict(self) -> dict[str, int]:
        return {
            "socialAction": self.social_action,
            "poll": self.poll,
            "otherEvents": self.other_events,
            "payments": self.payments,
        }


@dataclass(frozen=True, slots=True)
class EventParticipation:
    """An event of the window seen from one member's perspective."""

    event: EventRecord
    participated: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.event.id,
            "title": self.event.title,
            "date": _isoformat(self.event.date),
            "eventType": self.event.event_type.value,
            "participated": self.participated,
        }


@dataclass(frozen=True, slots=True)
class MemberScore:
    person_id: int
    full_name: str
    short_name: str
    scores: ScoreBreakdown
    events: tuple[EventParticipation, ...] = ()
    late_payments: tuple[LatePaymentRecord, ...] = ()

    @property
    def total_score(self) -> int:
        return self.scores.total

    def to_dict(self) -> dict[str, Any]:
        return {
            "personId": self.person_id,
            "fullName": self.full_name,
            "shortName": self.short_name,
            "scores": self.scores.to_dict(),
            "totalScore": self.total_score,
            "events": [item.to_dict() for item in self.events],
            "latePayments": [
                {
                    "year": payment.year,
                    "month": payment.month,
                    "paidAt": _isoformat(payment.paid_at),
                    "notes": payment.notes,
                }
                for payment in self.late_payments
            ],
        }


def score_member(
    member: MemberRecord,
    events_in_range: Iterable[EventRecord],
    late_payments_for_member: Iterable[LatePaymentRecord],
) -> MemberScore:
    """Score one member against the shared event list and their own late payments.

    Participant ids that do not belong to ``member`` are ignored, so the event
    list may carry ids of members outside the roster.
    """

    attended: set[EventType] = set()
    participations: list[EventParticipation] = []
    for event in events_in_range:
        participated = member.id in event.participant_ids
        if participated:
            attended.add(event.event_type)
        participations.append(EventParticipation(event=event, participated=participated))

    late_payments = tuple(late_payments_for_member)
    scores = ScoreBreakdown(
        social_action=int(EventType.SOCIAL_ACTION in attended),
        poll=int(EventType.POLL in attended),
        other_events=int(EventType.OTHER in attended),
        payments=0 if late_payments else 1,
    )

    return MemberScore(
        person_id=member.id,
        full_name=member.full_name,
        short_name=member.short_name,
        scores=scores,
        events=tuple(participations),
        late_payments=late_payments,
    )


__all__ = ["EventParticipation", "MemberScore", "ScoreBreakdown", "score_member"]
