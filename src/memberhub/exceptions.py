"""Exception hierarchy for MemberHub."""

from __future__ import annotations


class MemberHubError(Exception):
    """Base class for application errors."""


class InvalidReportDateError(MemberHubError, ValueError):
    """Raised when a report date is not a valid ``dd/MM/yyyy`` value."""

    def __init__(self, value: str):
        super().__init__(f"Invalid date {value!r}; expected dd/MM/yyyy")
        self.value = value


class UnsupportedLocaleError(MemberHubError, LookupError):
    """Raised when no collation table is available for a locale."""

    def __init__(self, locale: str):
        super().__init__(f"No collation available for locale {locale!r}")
        self.locale = locale


class DivisionNotFoundError(MemberHubError, LookupError):
    """Raised by write paths that require an existing division."""

    def __init__(self, division_id: int):
        super().__init__(f"Division {division_id} does not exist")
        self.division_id = division_id


class EventNotFoundError(MemberHubError, LookupError):
    """Raised when an event id does not resolve."""

    def __init__(self, event_id: int):
        super().__init__(f"Event {event_id} does not exist")
        self.event_id = event_id


class InvalidEventCategoryError(MemberHubError, ValueError):
    """Raised when an event's sub-category does not match its category."""


class LatePaymentAlreadyExistsError(MemberHubError):
    """Raised when a member already has a late payment for the period."""

    def __init__(self, person_id: int, year: int, month: int):
        super().__init__(
            f"Late payment already recorded for person {person_id} in {month:02d}/{year}"
        )
        self.person_id = person_id
        self.year = year
        self.month = month


__all__ = [
    "DivisionNotFoundError",
    "EventNotFoundError",
    "InvalidEventCategoryError",
    "InvalidReportDateError",
    "LatePaymentAlreadyExistsError",
    "MemberHubError",
    "UnsupportedLocaleError",
]
