"""Weekly allocation of deficit sessions.

Days are visited from the day after ``today`` in calendar order, wrapping from
Sunday to Monday. The first week cycle is seeded proportionally to each day's
share of the weekly capacity; every cycle is then topped up round-robin, one
session per day per pass, until it is full or nothing remains to place.
"""

from __future__ import annotations

import math
from fractions import Fraction

from ..common.logging import get_logger
from ..core.enums import Weekday
from .model import AllocationPlan, WeeklyCapacity

logger = get_logger(__name__)


def rotation_order(today: Weekday) -> list[Weekday]:
    days = list(Weekday)
    start = days.index(Weekday.parse(today)) + 1
    return days[start:] + days[:start]


def _seed(days: list[Weekday], capacity: WeeklyCapacity, placed: dict[Weekday, int], remaining: int) -> int:
    weekly_total = capacity.total
    seeded = 0
    for day in days:
        if remaining - seeded <= 0:
            break
        day_capacity = capacity.for_day(day)
        share = Fraction(day_capacity, weekly_total)
        amount = min(math.ceil(share * weekly_total), day_capacity, remaining - seeded)
        placed[day] += amount
        seeded += amount
    return seeded


def _top_up(days: list[Weekday], capacity: WeeklyCapacity, placed: dict[Weekday, int], remaining: int) -> int:
    added = 0
    while added < remaining:
        progressed = False
        for day in days:
            if added >= remaining:
                break
            if placed[day] < capacity.for_day(day):
                placed[day] += 1
                added += 1
                progressed = True
        if not progressed:
            break
    return added


def allocate(needed: int, capacity: WeeklyCapacity, today: Weekday) -> AllocationPlan:
    """Spread ``needed`` sessions over the coming weekdays.

    Never raises for degenerate input: zero need or zero weekly capacity gives
    an all-zero plan.
    """
    order = rotation_order(today)
    weekly_total = capacity.total
    if needed <= 0 or weekly_total <= 0:
        return AllocationPlan.empty(weekly_total=weekly_total, ordered_days=tuple(order))

    days = capacity.active_days(order)
    # exact for arbitrarily large counts
    weeks_needed = -(-needed // weekly_total)

    per_day = {day: 0 for day in Weekday}

    def place(placed: dict[Weekday, int]) -> None:
        for day, count in placed.items():
            per_day[day] += count

    # First cycle: proportional seed, then round-robin top-up.
    placed = {day: 0 for day in days}
    remaining = needed - _seed(days, capacity, placed, needed)
    remaining -= _top_up(days, capacity, placed, remaining)
    place(placed)

    # Middle cycles fill every active day to its capacity.
    middle = max(weeks_needed - 2, 0)
    if middle and remaining > 0:
        place({day: capacity.for_day(day) * middle for day in days})
        remaining -= weekly_total * middle

    # Last cycle: round-robin only.
    if remaining > 0:
        placed = {day: 0 for day in days}
        remaining -= _top_up(days, capacity, placed, remaining)
        place(placed)

    total_allocated = sum(per_day.values())
    plan = AllocationPlan(
        per_day=per_day,
        full_weeks=total_allocated // weekly_total,
        extra_sessions=total_allocated % weekly_total,
        weekly_total=weekly_total,
        ordered_days=tuple(order),
    )
    logger.debug(
        "deficit_allocated",
        needed=needed,
        weekly_total=weekly_total,
        weeks=weeks_needed,
        today=Weekday.parse(today).value,
    )
    return plan
