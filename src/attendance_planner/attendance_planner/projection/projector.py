"""Attendance projection: surplus (missable sessions) or deficit (needed sessions)."""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Optional

from ..common.logging import get_logger
from ..core.exceptions import (
    AttendedExceedsTotalError,
    MissingAttendedError,
    TargetOutOfRangeError,
    ZeroTotalError,
)
from .factory import ProjectionStrategyFactory
from .model import AttendanceInput, ProjectionResult

logger = get_logger(__name__)

_factory = ProjectionStrategyFactory()


def as_exact_percent(value: int | float | str | Decimal | Fraction | None) -> Optional[Fraction]:
    """Exact rational for a percentage; floats are read through their decimal text."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, Fraction)):
        return Fraction(value)
    try:
        return Fraction(str(value).strip())
    except (ValueError, ZeroDivisionError):
        return None


def validate_input(
    total_sessions: Optional[int],
    attended_sessions: Optional[int],
    target_percent: int | float | str | Decimal | Fraction | None,
) -> AttendanceInput:
    """Checks run in a fixed order; the first failing one is raised."""
    if not total_sessions:
        raise ZeroTotalError()
    if attended_sessions is None or attended_sessions < 0:
        raise MissingAttendedError()
    if attended_sessions > total_sessions:
        raise AttendedExceedsTotalError()

    target = as_exact_percent(target_percent)
    if target is None or not (0 < target <= 100):
        raise TargetOutOfRangeError()

    return AttendanceInput(
        total_sessions=int(total_sessions),
        attended_sessions=int(attended_sessions),
        target_percent=target,
    )


def project(
    total_sessions: Optional[int],
    attended_sessions: Optional[int],
    target_percent: int | float | str | Decimal | Fraction | None,
) -> ProjectionResult:
    data = validate_input(total_sessions, attended_sessions, target_percent)
    strategy = _factory.for_standing(current=data.current_percent, target=data.target_percent)
    result = strategy.project(data)
    logger.debug(
        "attendance_projected",
        total=data.total_sessions,
        attended=data.attended_sessions,
        target=float(data.target_percent),
        kind=result.kind.value,
    )
    return result
