from __future__ import annotations

import math
from fractions import Fraction

from ...core.exceptions import TargetUnreachableError
from ..model import AttendanceInput, Deficit, round_percent
from .base import ProjectionStrategy


class DeficitStrategy(ProjectionStrategy):
    """Below target: smallest n with (attended + n) / (total + n) >= target / 100."""

    def project(self, data: AttendanceInput) -> Deficit:
        target = data.target_percent
        if target >= 100:
            raise TargetUnreachableError()

        needed = math.ceil(
            (target * data.total_sessions - 100 * data.attended_sessions) / (100 - target)
        )
        new_total = data.total_sessions + needed
        new_percent = Fraction((data.attended_sessions + needed) * 100, new_total)

        return Deficit(
            current_percent=round_percent(data.current_percent),
            needed=needed,
            new_total=new_total,
            new_percent=round_percent(new_percent),
        )
