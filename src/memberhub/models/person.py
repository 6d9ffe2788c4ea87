"""Member records."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy import UniqueConstraint
from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .division import Division
    from .late_payment import LatePayment


class Person(SQLModel, table=True):
    """A member of a division. Only active members are scored."""

    __tablename__: ClassVar[str] = "person"
    __table_args__ = (
        UniqueConstraint("short_name", "division_id", name="uq_person_short_name_division"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    full_name: str = Field(nullable=False, unique=True, max_length=150)
    short_name: str = Field(nullable=False, max_length=50, index=True)
    division_id: int = Field(foreign_key="division.id", nullable=False, index=True)
    # a HierarchyLevel value
    hierarchy_level: Optional[str] = Field(default=None, max_length=32)
    is_active: bool = Field(default=True, nullable=False, index=True)

    division: "Division" = Relationship(
        back_populates="persons",
        sa_relationship=relationship("Division", back_populates="persons"),
    )
    late_payments: list["LatePayment"] = Relationship(
        back_populates="person",
        sa_relationship=relationship("LatePayment", back_populates="person"),
    )
