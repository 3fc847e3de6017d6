from __future__ import annotations

import math

from ..model import AttendanceInput, Surplus, round_percent
from .base import ProjectionStrategy


class SurplusStrategy(ProjectionStrategy):
    """Current attendance meets the target: count the sessions that can be missed."""

    def project(self, data: AttendanceInput) -> Surplus:
        slack = data.attended_sessions - data.target_percent * data.total_sessions / 100
        return Surplus(
            current_percent=round_percent(data.current_percent),
            missable=max(0, math.floor(slack)),
        )
