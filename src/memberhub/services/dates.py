"""Parsing of ``dd/MM/yyyy`` report dates into an inclusive datetime window."""

from __future__ import annotations

import re
from datetime import date, datetime, time

from ..exceptions import InvalidReportDateError

REPORT_DATE_FORMAT = "%d/%m/%Y"
_REPORT_DATE_PATTERN = re.compile(r"^\d{2}/\d{2}/\d{4}$")


def parse_report_date(value: str) -> date:
    """Parse a ``dd/MM/yyyy`` string, rejecting impossible calendar dates."""

    text = (value or "").strip()
    if not _REPORT_DATE_PATTERN.match(text):
        raise InvalidReportDateError(value)
    try:
        return datetime.strptime(text, REPORT_DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidReportDateError(value) from exc


def report_window(start: str, end: str) -> tuple[datetime, datetime]:
    """Return ``(start 00:00:00, end 23:59:59.999999)`` for two report dates."""

    return (
        datetime.combine(parse_report_date(start), time.min),
        datetime.combine(parse_report_date(end), time.max),
    )


__all__ = ["REPORT_DATE_FORMAT", "parse_report_date", "report_window"]
