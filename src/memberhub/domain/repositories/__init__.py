"""Repository protocol definitions for domain layer."""

from .division import DivisionRepository
from .event import EventRepository
from .late_payment import LatePaymentRepository
from .person import PersonRepository

__all__ = [
    "DivisionRepository",
    "EventRepository",
    "LatePaymentRepository",
    "PersonRepository",
]
