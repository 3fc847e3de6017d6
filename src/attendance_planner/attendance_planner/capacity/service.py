from __future__ import annotations

from typing import Any, Mapping

from ..allocation.model import WeeklyCapacity
from ..common.logging import get_logger
from ..common.validators import require_non_negative_int, require_user_id
from ..core.enums import Weekday
from ..core.exceptions import NotFoundError, ValidationError
from .repository import WeeklyCapacityRepository

logger = get_logger(__name__)


class WeeklyCapacityService:
    def __init__(self, capacities: WeeklyCapacityRepository):
        self._capacities = capacities

    def get(self, user_id: str) -> WeeklyCapacity:
        """Stored capacity for the user, or an all-zero week when none is saved."""
        user_id = require_user_id(user_id)
        capacity = self._capacities.load(user_id)
        if capacity is None:
            logger.info("weekly_capacity_missing", user_id=user_id)
            return WeeklyCapacity.empty()
        return capacity

    def has_schedule(self, user_id: str) -> bool:
        return self._capacities.exists(require_user_id(user_id))

    def save(self, user_id: str, values: Mapping[str, Any]) -> WeeklyCapacity:
        user_id = require_user_id(user_id)
        if not isinstance(values, Mapping):
            raise ValidationError("Weekly capacity must map weekdays to session counts")

        counts: dict[str, int] = {}
        for key, raw in values.items():
            day = Weekday.parse(key)
            counts[day.value] = require_non_negative_int(raw, f"Sessions for {day.label}")

        capacity = WeeklyCapacity(**counts)
        self._capacities.save(user_id, capacity)
        logger.info("weekly_capacity_saved", user_id=user_id, weekly_total=capacity.total)
        return capacity

    def update_day(self, user_id: str, day: str | Weekday, sessions: Any) -> WeeklyCapacity:
        user_id = require_user_id(user_id)
        weekday = Weekday.parse(day)
        count = require_non_negative_int(sessions, f"Sessions for {weekday.label}")

        if not self._capacities.update_day(user_id, weekday, count):
            raise NotFoundError("No saved weekly schedule for this user")
        logger.info("weekly_capacity_day_updated", user_id=user_id, day=weekday.value, sessions=count)
        return self.get(user_id)
