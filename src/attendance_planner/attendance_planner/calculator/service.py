from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from ..allocation.model import WeeklyCapacity
from ..allocation.planner import allocate
from ..capacity.service import WeeklyCapacityService
from ..common.datetime_utils import today_weekday
from ..common.logging import get_logger
from ..core.constants import DEFAULT_TARGET_PERCENT
from ..core.exceptions import ValidationError
from ..projection.model import Deficit
from ..projection.projector import project
from .model import CalculationReport

logger = get_logger(__name__)


class CalculatorService:
    """Attendance calculator: projection first, then a day plan for deficits."""

    def __init__(
        self,
        capacity_service: WeeklyCapacityService | None = None,
        *,
        default_target: float = DEFAULT_TARGET_PERCENT,
    ):
        self._capacity = capacity_service
        self._default_target = default_target

    def _resolve_capacity(
        self,
        capacity: WeeklyCapacity | Mapping[str, Any] | None,
        user_id: Optional[str],
    ) -> Optional[WeeklyCapacity]:
        if isinstance(capacity, WeeklyCapacity):
            return capacity
        if capacity is not None:
            if not isinstance(capacity, Mapping):
                raise ValidationError("Weekly capacity must map weekdays to session counts")
            return WeeklyCapacity.from_mapping(capacity)
        if user_id and self._capacity:
            return self._capacity.get(user_id)
        return None

    def calculate(
        self,
        total_sessions: Optional[int],
        attended_sessions: Optional[int],
        target_percent: Optional[float] = None,
        *,
        capacity: WeeklyCapacity | Mapping[str, Any] | None = None,
        user_id: Optional[str] = None,
        use_schedule: bool = True,
        now: Optional[datetime] = None,
    ) -> CalculationReport:
        target = self._default_target if target_percent is None else target_percent
        projection = project(total_sessions, attended_sessions, target)
        today = today_weekday(now)

        plan = None
        weekly = None
        if isinstance(projection, Deficit) and use_schedule:
            weekly = self._resolve_capacity(capacity, user_id)
            if weekly is not None and weekly.total > 0:
                plan = allocate(projection.needed, weekly, today)

        logger.info(
            "attendance_calculated",
            user_id=user_id,
            kind=projection.kind.value,
            has_plan=plan is not None,
        )
        return CalculationReport(
            projection=projection,
            target_percent=float(target),
            today=today,
            plan=plan,
            capacity=weekly,
        )
