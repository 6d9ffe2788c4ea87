"""Regional grouping of divisions."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

if TYPE_CHECKING:  # pragma: no cover
    from .command import Command
    from .division import Division


class Regional(SQLModel, table=True):
    """Regional unit; the command link is optional for legacy rows."""

    __tablename__: ClassVar[str] = "regional"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, unique=True, max_length=100)
    command_id: Optional[int] = Field(default=None, foreign_key="command.id", index=True)

    command: "Command | None" = Relationship(
        back_populates="regionals",
        sa_relationship=relationship("Command", back_populates="regionals"),
    )
    divisions: list["Division"] = Relationship(
        back_populates="regional",
        sa_relationship=relationship("Division", back_populates="regional"),
    )
