"""Domain records and repository protocols."""

from .records import (
    DivisionEventCount,
    DivisionFound,
    DivisionLookup,
    DivisionNotFound,
    DivisionRecord,
    EventCategory,
    EventDraft,
    EventRecord,
    LatePaymentRecord,
    MemberRecord,
    OtherActivity,
    ParticipationCount,
    Poll,
    ScorePeriod,
    SocialAction,
    SocialActionListing,
    category_from_columns,
    validate_category,
)

__all__ = [
    "DivisionEventCount",
    "DivisionFound",
    "DivisionLookup",
    "DivisionNotFound",
    "DivisionRecord",
    "EventCategory",
    "EventDraft",
    "EventRecord",
    "LatePaymentRecord",
    "MemberRecord",
    "OtherActivity",
    "ParticipationCount",
    "Poll",
    "ScorePeriod",
    "SocialAction",
    "SocialActionListing",
    "category_from_columns",
    "validate_category",
]
