"""Expansion of a date window into calendar months."""

from __future__ import annotations

from datetime import date, datetime, time

from ..domain.records import ScorePeriod


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def enumerate_periods(start: date, end: date) -> list[ScorePeriod]:
    """Return every (year, month) touched by ``[start, end]``, in order.

    Both endpoints are inclusive. A window whose start falls after its end
    yields an empty list rather than raising.
    """

    if _as_datetime(start) > _as_datetime(end):
        return []

    last = ScorePeriod(end.year, end.month)
    current = ScorePeriod(start.year, start.month)
    periods: list[ScorePeriod] = []
    while current <= last:
        periods.append(current)
        current = current.next()
    return periods


__all__ = ["enumerate_periods"]
