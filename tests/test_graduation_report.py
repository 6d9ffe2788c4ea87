"""Tests for the graduation report pipeline using in-memory repositories."""

from __future__ import annotations

from datetime import datetime

import pytest

from memberhub.constants import ActionType
from memberhub.domain.records import (
    DivisionFound,
    DivisionNotFound,
    DivisionRecord,
    EventRecord,
    LatePaymentRecord,
    MemberRecord,
    OtherActivity,
    Poll,
    SocialAction,
)
from memberhub.services.graduation import (
    GraduationReport,
    generate_graduation_report,
    group_late_payments,
    resolve_division,
)

START = datetime(2025, 6, 1, 0, 0, 0)
END = datetime(2025, 7, 31, 23, 59, 59)


class _FakeDivisions:
    def __init__(self, *division_ids: int):
        self._divisions = {
            division_id: DivisionRecord(id=division_id, name=f"Divisão {division_id}", regional_id=1)
            for division_id in division_ids
        }
        self.calls: list[int] = []

    def find_division(self, division_id: int):
        self.calls.append(division_id)
        return self._divisions.get(division_id)


class _FakePersons:
    def __init__(self, members):
        self._members = list(members)
        self.calls: list[int] = []

    def find_active_members(self, division_id: int):
        self.calls.append(division_id)
        return list(self._members)


class _FakeEvents:
    def __init__(self, events):
        self._events = list(events)
        self.calls: list[tuple] = []

    def find_events(self, division_id, start, end, *, member_ids=None):
        self.calls.append((division_id, start, end, tuple(member_ids or ())))
        return [event for event in self._events if start <= event.date <= end]


class _FakeLatePayments:
    def __init__(self, records):
        self._records = list(records)
        self.calls: list[tuple] = []

    def find_late_payments(self, member_ids, periods):
        ids, wanted = set(member_ids), set(periods)
        self.calls.append((tuple(sorted(ids)), tuple(sorted(wanted))))
        return [r for r in self._records if r.person_id in ids and r.period in wanted]


class _ExplodingEvents:
    def find_events(self, division_id, start, end, *, member_ids=None):
        raise ConnectionError("database unavailable")


def _run(divisions, persons, events, late_payments, division_id=1, **kwargs):
    return generate_graduation_report(
        division_id,
        START,
        END,
        divisions=divisions,
        persons=persons,
        events=events,
        late_payments=late_payments,
        **kwargs,
    )


def test_unknown_division_returns_not_found_without_touching_providers():
    persons, events, payments = _FakePersons([]), _FakeEvents([]), _FakeLatePayments([])

    result = _run(_FakeDivisions(1), persons, events, payments, division_id=999)

    assert result == DivisionNotFound(999)
    assert persons.calls == []
    assert events.calls == []
    assert payments.calls == []


def test_empty_roster_returns_empty_report():
    events, payments = _FakeEvents([]), _FakeLatePayments([])

    result = _run(_FakeDivisions(1), _FakePersons([]), events, payments)

    assert isinstance(result, GraduationReport)
    assert result.data == ()
    assert result.to_dict() == {
        "period": {"start": START.isoformat(), "end": END.isoformat()},
        "data": [],
    }
    assert events.calls == []
    assert payments.calls == []


def test_single_member_end_to_end_scenario():
    member = MemberRecord(id=1, full_name="Marcos Antunes", short_name="Marcos")
    event = EventRecord(
        id=10,
        title="Doação de alimentos",
        date=datetime(2025, 6, 14, 9),
        category=SocialAction(ActionType.EXTERNAL),
        participant_ids=frozenset({1}),
    )
    late = LatePaymentRecord(id=3, person_id=1, year=2025, month=6)

    result = _run(
        _FakeDivisions(1), _FakePersons([member]), _FakeEvents([event]), _FakeLatePayments([late])
    )

    [score] = result.data
    assert score.scores.to_dict() == {
        "socialAction": 1,
        "poll": 0,
        "otherEvents": 0,
        "payments": 0,
    }
    assert score.total_score == 1
    assert score.late_payments == (late,)


def test_output_sorted_by_short_name_with_portuguese_collation():
    members = [
        MemberRecord(id=1, full_name="Ângela Souza", short_name="Ângela"),
        MemberRecord(id=2, full_name="Bruno Lima", short_name="Bruno"),
        MemberRecord(id=3, full_name="Ana Ribeiro", short_name="Ana"),
    ]

    result = _run(_FakeDivisions(1), _FakePersons(members), _FakeEvents([]), _FakeLatePayments([]))

    assert [score.short_name for score in result.data] == ["Ana", "Ângela", "Bruno"]


def test_providers_receive_roster_ids_and_enumerated_months():
    members = [
        MemberRecord(id=4, full_name="Davi Costa", short_name="Davi"),
        MemberRecord(id=2, full_name="Bia Costa", short_name="Bia"),
    ]
    events, payments = _FakeEvents([]), _FakeLatePayments([])

    _run(_FakeDivisions(1), _FakePersons(members), events, payments)

    assert events.calls == [(1, START, END, (4, 2))]
    assert payments.calls == [((2, 4), ((2025, 6), (2025, 7)))]


def test_late_payments_only_affect_their_owner():
    members = [
        MemberRecord(id=1, full_name="Ana Ribeiro", short_name="Ana"),
        MemberRecord(id=2, full_name="Bruno Lima", short_name="Bruno"),
    ]
    records = [LatePaymentRecord(id=1, person_id=2, year=2025, month=7)]

    result = _run(
        _FakeDivisions(1), _FakePersons(members), _FakeEvents([]), _FakeLatePayments(records)
    )

    payments = {score.short_name: score.scores.payments for score in result.data}
    assert payments == {"Ana": 1, "Bruno": 0}


def test_members_without_records_always_get_payment_point():
    members = [MemberRecord(id=i, full_name=f"Membro {i}", short_name=f"M{i}") for i in range(1, 8)]
    events = [
        EventRecord(id=i, title="Enquete", date=datetime(2025, 6, i), category=Poll())
        for i in range(1, 5)
    ]

    result = _run(_FakeDivisions(1), _FakePersons(members), _FakeEvents(events), _FakeLatePayments([]))

    assert all(score.scores.payments == 1 for score in result.data)


def test_each_member_sees_every_event_in_window():
    members = [
        MemberRecord(id=1, full_name="Ana Ribeiro", short_name="Ana"),
        MemberRecord(id=2, full_name="Bruno Lima", short_name="Bruno"),
    ]
    events = [
        EventRecord(
            id=1,
            title="Confraternização",
            date=datetime(2025, 7, 2),
            category=OtherActivity(),
            participant_ids=frozenset({2}),
        ),
        EventRecord(id=2, title="Fora da janela", date=datetime(2025, 8, 2), category=Poll()),
    ]

    result = _run(_FakeDivisions(1), _FakePersons(members), _FakeEvents(events), _FakeLatePayments([]))

    ana, bruno = result.data
    assert [(item.event.id, item.participated) for item in ana.events] == [(1, False)]
    assert [(item.event.id, item.participated) for item in bruno.events] == [(1, True)]
    assert bruno.scores.other_events == 1


def test_period_echo_uses_values_given_by_caller():
    result = _run(
        _FakeDivisions(1),
        _FakePersons([]),
        _FakeEvents([]),
        _FakeLatePayments([]),
        period_start="01/06/2025",
        period_end="31/07/2025",
    )

    assert result.to_dict()["period"] == {"start": "01/06/2025", "end": "31/07/2025"}


def test_provider_failure_propagates():
    member = MemberRecord(id=1, full_name="Ana Ribeiro", short_name="Ana")

    with pytest.raises(ConnectionError):
        _run(_FakeDivisions(1), _FakePersons([member]), _ExplodingEvents(), _FakeLatePayments([]))


def test_resolve_division_tags_outcome():
    divisions = _FakeDivisions(1)

    assert isinstance(resolve_division(divisions, 1), DivisionFound)
    assert resolve_division(divisions, 2) == DivisionNotFound(2)


def test_group_late_payments_by_person():
    records = [
        LatePaymentRecord(id=1, person_id=1, year=2025, month=6),
        LatePaymentRecord(id=2, person_id=2, year=2025, month=6),
        LatePaymentRecord(id=3, person_id=1, year=2025, month=7),
    ]

    grouped = group_late_payments(records)

    assert [r.id for r in grouped[1]] == [1, 3]
    assert [r.id for r in grouped[2]] == [2]
    assert 3 not in grouped
