"""Division: the smallest organisational unit."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .event import Event
    from .person import Person
    from .regional import Regional


class Division(SQLModel, table=True):
    """Owns members and events."""

    __tablename__: ClassVar[str] = "division"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, unique=True, max_length=150)
    regional_id: int = Field(foreign_key="regional.id", nullable=False, index=True)

    regional: "Regional" = Relationship(
        back_populates="divisions",
        sa_relationship=relationship("Regional", back_populates="divisions"),
    )
    persons: list["Person"] = Relationship(
        back_populates="division",
        sa_relationship=relationship("Person", back_populates="division"),
    )
    events: list["Event"] = Relationship(
        back_populates="division",
        sa_relationship=relationship("Event", back_populates="division"),
    )
