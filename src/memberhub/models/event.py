"""Division events and their participants."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy import DateTime
from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .division import Division
    from .person import Person


class EventPerson(SQLModel, table=True):
    """Association table recording who took part in an event."""

    __tablename__: ClassVar[str] = "event_has_person"

    event_id: int = Field(foreign_key="event.id", primary_key=True)
    person_id: int = Field(foreign_key="person.id", primary_key=True, index=True)


class Event(SQLModel, table=True):
    """Social action, poll or other activity held by a division."""

    __tablename__: ClassVar[str] = "event"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False, max_length=150)
    # wall-clock time of the organisation, stored without offset
    date: datetime = Field(sa_type=DateTime(timezone=False), nullable=False, index=True)
    description: str = Field(default="", max_length=1000)
    division_id: int = Field(foreign_key="division.id", nullable=False, index=True)
    event_type: str = Field(default="social_action", nullable=False, max_length=16, index=True)
    # only set when event_type is social_action
    action_type: Optional[str] = Field(default=None, max_length=16)

    division: "Division" = Relationship(
        back_populates="events",
        sa_relationship=relationship("Division", back_populates="events"),
    )
    participants: list["Person"] = Relationship(
        sa_relationship=relationship("Person", secondary="event_has_person", viewonly=True),
    )
