from __future__ import annotations

from typing import Optional, Protocol

from ..allocation.model import WeeklyCapacity
from ..core.enums import Weekday


class WeeklyCapacityRepository(Protocol):
    """Storage for each user's weekly session counts, one record per user."""

    def load(self, user_id: str) -> Optional[WeeklyCapacity]:
        raise NotImplementedError

    def save(self, user_id: str, capacity: WeeklyCapacity) -> None:
        """Create or replace the user's weekly capacity."""

        raise NotImplementedError

    def update_day(self, user_id: str, day: Weekday, sessions: int) -> bool:
        """Change a single day. Returns False when the user has no record."""

        raise NotImplementedError

    def exists(self, user_id: str) -> bool:
        raise NotImplementedError
