from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Mapping

from ..common.validators import require_int
from ..core.enums import Weekday


@dataclass(frozen=True)
class WeeklyCapacity:
    """Sessions held on each weekday of a typical week."""

    monday: int = 0
    tuesday: int = 0
    wednesday: int = 0
    thursday: int = 0
    friday: int = 0
    saturday: int = 0
    sunday: int = 0

    @classmethod
    def empty(cls) -> "WeeklyCapacity":
        return cls()

    @classmethod
    def from_mapping(cls, values: Mapping[Any, Any]) -> "WeeklyCapacity":
        """Build from weekday-keyed counts.

        Missing days count as 0 and negative counts are clamped to 0.
        Unknown keys, non-numeric or fractional counts raise ValidationError.
        """
        counts: dict[str, int] = {}
        for key, raw in values.items():
            day = Weekday.parse(key)
            count = 0 if raw is None or raw == "" else require_int(raw, f"Sessions for {day.label}")
            counts[day.value] = max(count, 0)
        return cls(**counts)

    def for_day(self, day: Weekday) -> int:
        return max(int(getattr(self, Weekday.parse(day).value)), 0)

    @property
    def total(self) -> int:
        return sum(self.for_day(day) for day in Weekday)

    def active_days(self, order: list[Weekday] | None = None) -> list[Weekday]:
        """Days with positive capacity, in ``order`` (default Monday-first)."""
        return [day for day in (order or list(Weekday)) if self.for_day(day) > 0]

    def as_dict(self) -> dict[str, int]:
        return {f.name: int(getattr(self, f.name)) for f in fields(self)}


def _zero_per_day() -> dict[Weekday, int]:
    return {day: 0 for day in Weekday}


@dataclass(frozen=True)
class AllocationPlan:
    """Deficit sessions spread over upcoming weekdays.

    ``per_day`` totals cover every week cycle of the plan, so a day can exceed
    its single-week capacity when the plan spans several weeks.
    """

    per_day: dict[Weekday, int] = field(default_factory=_zero_per_day)
    full_weeks: int = 0
    extra_sessions: int = 0
    weekly_total: int = 0
    ordered_days: tuple[Weekday, ...] = tuple(Weekday)

    @classmethod
    def empty(cls, *, weekly_total: int = 0, ordered_days: tuple[Weekday, ...] = tuple(Weekday)) -> "AllocationPlan":
        return cls(weekly_total=weekly_total, ordered_days=ordered_days)

    @property
    def total_allocated(self) -> int:
        return sum(self.per_day.values())

    @property
    def is_empty(self) -> bool:
        return self.total_allocated == 0

    def breakdown(self) -> list[tuple[Weekday, int]]:
        """Non-zero days in rotation order."""
        return [(day, self.per_day[day]) for day in self.ordered_days if self.per_day.get(day, 0) > 0]
