from __future__ import annotations

from enum import Enum

from .constants import DAYS_PER_WEEK
from .exceptions import ValidationError


class Weekday(str, Enum):
    """Calendar weekdays in canonical Monday-first order."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def parse(cls, value: str | Weekday) -> Weekday:
        """Full names or prefixes of at least three letters ("mon", "thurs"), any case."""
        if isinstance(value, Weekday):
            return value
        text = str(value).strip().lower()
        if len(text) >= 3:
            for day in cls:
                if day.value.startswith(text):
                    return day
        raise ValidationError(f"Unknown weekday: {value!r}")

    @classmethod
    def from_index(cls, index: int) -> Weekday:
        """Map ``date.weekday()`` (Monday=0) to a Weekday."""
        return list(cls)[index % DAYS_PER_WEEK]

    @property
    def label(self) -> str:
        return self.value.capitalize()


class ProjectionKind(str, Enum):
    """Which side of the target the current attendance sits on."""

    SURPLUS = "SURPLUS"
    DEFICIT = "DEFICIT"
