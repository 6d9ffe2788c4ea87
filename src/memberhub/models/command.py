"""Top level of the organisational hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .regional import Regional


class Command(SQLModel, table=True):
    """A numbered command grouping several regionals."""

    __tablename__: ClassVar[str] = "command"

    id: Optional[int] = Field(default=None, primary_key=True)
    number: int = Field(nullable=False, unique=True, index=True)
    name: str = Field(nullable=False, max_length=100)

    regionals: list["Regional"] = Relationship(
        back_populates="command",
        sa_relationship=relationship("Regional", back_populates="command"),
    )
