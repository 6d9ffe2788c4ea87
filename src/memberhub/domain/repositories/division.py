"""Division repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ..records import DivisionRecord


class DivisionRepository(Protocol):
    """Read access to divisions."""

    def find_division(self, division_id: int) -> Optional[DivisionRecord]:
        """Return the division or ``None`` when the id does not resolve."""
        ...

    def find_divisions(self, regional_id: int) -> list[DivisionRecord]:
        """Return every division of a regional."""
        ...
