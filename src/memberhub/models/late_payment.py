"""Late membership payments."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy import DateTime, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .person import Person


class LatePayment(SQLModel, table=True):
    """Marks a member as delinquent for one (year, month).

    Absence of a row for a period means the member paid on time.
    """

    __tablename__: ClassVar[str] = "late_payment"
    __table_args__ = (
        UniqueConstraint("person_id", "year", "month", name="uq_late_payment_person_period"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    person_id: int = Field(foreign_key="person.id", nullable=False, index=True)
    year: int = Field(nullable=False, ge=1)
    month: int = Field(nullable=False, ge=1, le=12)
    paid_at: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=False))
    notes: Optional[str] = Field(default=None, max_length=255)

    person: "Person" = Relationship(
        back_populates="late_payments",
        sa_relationship=relationship("Person", back_populates="late_payments"),
    )
