"""Concrete repository implementations using SQLModel."""

from .division import SQLModelDivisionRepository
from .event import SQLModelEventRepository
from .late_payment import SQLModelLatePaymentRepository
from .person import SQLModelPersonRepository

__all__ = [
    "SQLModelDivisionRepository",
    "SQLModelEventRepository",
    "SQLModelLatePaymentRepository",
    "SQLModelPersonRepository",
]
