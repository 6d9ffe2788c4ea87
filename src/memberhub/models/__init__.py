"""SQLModel table exports."""

from .command import Command
from .division import Division
from .event import Event, EventPerson
from .late_payment import LatePayment
from .person import Person
from .regional import Regional

__all__ = [
    "Command",
    "Division",
    "Event",
    "EventPerson",
    "LatePayment",
    "Person",
    "Regional",
]
