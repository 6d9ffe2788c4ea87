"""Person repository protocol."""

from __future__ import annotations

from typing import Protocol

from ..records import MemberRecord


class PersonRepository(Protocol):
    """Roster provider."""

    def find_active_members(self, division_id: int) -> list[MemberRecord]:
        """Return the active members of a division, in no guaranteed order."""
        ...
