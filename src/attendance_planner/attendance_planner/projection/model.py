from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Union

from ..core.constants import PERCENT_DECIMALS
from ..core.enums import ProjectionKind


def round_percent(value: Fraction) -> float:
    """Display rounding, applied once after exact arithmetic."""
    return round(float(value), PERCENT_DECIMALS)


@dataclass(frozen=True)
class AttendanceInput:
    """Validated attendance figures. Target is kept exact as a Fraction."""

    total_sessions: int
    attended_sessions: int
    target_percent: Fraction

    @property
    def current_percent(self) -> Fraction:
        return Fraction(self.attended_sessions * 100, self.total_sessions)


@dataclass(frozen=True)
class Surplus:
    """At or above target: ``missable`` future sessions may be skipped."""

    current_percent: float
    missable: int

    @property
    def kind(self) -> ProjectionKind:
        return ProjectionKind.SURPLUS


@dataclass(frozen=True)
class Deficit:
    """Below target: ``needed`` consecutive attended sessions restore it."""

    current_percent: float
    needed: int
    new_total: int
    new_percent: float

    @property
    def kind(self) -> ProjectionKind:
        return ProjectionKind.DEFICIT


ProjectionResult = Union[Surplus, Deficit]
