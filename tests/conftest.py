from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest

from src.attendance_planner.attendance_planner.allocation.model import WeeklyCapacity
from src.attendance_planner.attendance_planner.core.enums import Weekday


class InMemoryCapacities:
    def __init__(self, initial: Optional[dict[str, WeeklyCapacity]] = None):
        self._by_user: dict[str, WeeklyCapacity] = dict(initial or {})
        self.saved: list[tuple[str, WeeklyCapacity]] = []

    def load(self, user_id: str) -> Optional[WeeklyCapacity]:
        return self._by_user.get(user_id)

    def save(self, user_id: str, capacity: WeeklyCapacity) -> None:
        self.saved.append((user_id, capacity))
        self._by_user[user_id] = capacity

    def update_day(self, user_id: str, day: Weekday, sessions: int) -> bool:
        current = self._by_user.get(user_id)
        if current is None:
            return False
        values = current.as_dict()
        values[day.value] = sessions
        self._by_user[user_id] = WeeklyCapacity(**values)
        return True

    def exists(self, user_id: str) -> bool:
        return user_id in self._by_user


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday
    return datetime(2026, 2, 4, 9, 0, 0)


@pytest.fixture
def capacity_repo() -> InMemoryCapacities:
    return InMemoryCapacities()


@pytest.fixture
def mwf_capacity() -> WeeklyCapacity:
    return WeeklyCapacity(monday=2, tuesday=1, wednesday=2, thursday=1, friday=2)
