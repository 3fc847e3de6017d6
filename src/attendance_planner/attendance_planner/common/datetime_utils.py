from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.enums import Weekday


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def weekday_of(day: date) -> Weekday:
    return Weekday.from_index(day.weekday())


def today_weekday(now: Optional[datetime] = None) -> Weekday:
    return weekday_of((now or now_local()).date())
