from __future__ import annotations

import time

import pytest

from src.attendance_planner.attendance_planner.allocation.model import WeeklyCapacity
from src.attendance_planner.attendance_planner.allocation.planner import allocate, rotation_order
from src.attendance_planner.attendance_planner.core.enums import Weekday

MON, TUE, WED, THU, FRI, SAT, SUN = list(Weekday)


def test_rotation_starts_the_day_after_today():
    assert rotation_order(WED) == [THU, FRI, SAT, SUN, MON, TUE, WED]
    assert rotation_order(SUN) == [MON, TUE, WED, THU, FRI, SAT, SUN]
    assert rotation_order("saturday") == [SUN, MON, TUE, WED, THU, FRI, SAT]


def test_all_zero_capacity_gives_empty_plan():
    plan = allocate(5, WeeklyCapacity.empty(), WED)

    assert all(count == 0 for count in plan.per_day.values())
    assert plan.full_weeks == 0
    assert plan.extra_sessions == 0
    assert plan.is_empty


def test_zero_need_gives_empty_plan(mwf_capacity):
    plan = allocate(0, mwf_capacity, MON)

    assert plan.total_allocated == 0
    assert plan.weekly_total == 8


def test_today_is_considered_last():
    capacity = WeeklyCapacity(**{day.value: 1 for day in Weekday})

    plan = allocate(1, capacity, WED)
    assert plan.per_day[THU] == 1
    assert plan.per_day[WED] == 0

    plan = allocate(3, capacity, WED)
    assert [day for day, _ in plan.breakdown()] == [THU, FRI, SAT]


def test_single_week_fills_soonest_days(mwf_capacity):
    plan = allocate(5, mwf_capacity, WED)

    assert plan.per_day == {MON: 2, TUE: 0, WED: 0, THU: 1, FRI: 2, SAT: 0, SUN: 0}
    assert plan.full_weeks == 0
    assert plan.extra_sessions == 5
    assert plan.breakdown() == [(THU, 1), (FRI, 2), (MON, 2)]


def test_multi_week_totals_accumulate_per_day(mwf_capacity):
    plan = allocate(20, mwf_capacity, WED)

    assert plan.per_day == {MON: 5, TUE: 3, WED: 4, THU: 3, FRI: 5, SAT: 0, SUN: 0}
    assert plan.full_weeks == 2
    assert plan.extra_sessions == 4


def test_round_robin_favours_earlier_days():
    capacity = WeeklyCapacity(**{day.value: 1 for day in Weekday})

    plan = allocate(10, capacity, SUN)

    assert plan.per_day[MON] == plan.per_day[TUE] == plan.per_day[WED] == 2
    assert plan.per_day[THU] == plan.per_day[SUN] == 1
    assert (plan.full_weeks, plan.extra_sessions) == (1, 3)


def test_exact_weeks_have_no_extra(mwf_capacity):
    plan = allocate(16, mwf_capacity, FRI)

    assert plan.per_day == {MON: 4, TUE: 2, WED: 4, THU: 2, FRI: 4, SAT: 0, SUN: 0}
    assert (plan.full_weeks, plan.extra_sessions) == (2, 0)


@pytest.mark.parametrize(
    "capacity",
    [
        WeeklyCapacity(monday=2, tuesday=1, wednesday=2, thursday=1, friday=2),
        WeeklyCapacity(saturday=3),
        WeeklyCapacity(monday=1, sunday=4),
        WeeklyCapacity(**{day.value: 5 for day in Weekday}),
    ],
)
def test_allocation_conserves_need_and_skips_empty_days(capacity):
    for today in Weekday:
        for needed in range(1, 41):
            plan = allocate(needed, capacity, today)

            assert plan.total_allocated == needed
            assert plan.full_weeks * plan.weekly_total + plan.extra_sessions == needed
            for day in Weekday:
                if capacity.for_day(day) == 0:
                    assert plan.per_day[day] == 0


def test_capacity_from_mapping_clamps_and_defaults():
    capacity = WeeklyCapacity.from_mapping({"Monday": -3, " tuesday ": 2, "friday": "4"})

    assert capacity.as_dict() == {
        "monday": 0,
        "tuesday": 2,
        "wednesday": 0,
        "thursday": 0,
        "friday": 4,
        "saturday": 0,
        "sunday": 0,
    }
    assert capacity.total == 6
    assert capacity.active_days() == [TUE, FRI]


def _allocate_week_by_week(needed, capacity, today):
    """Plain cycle-per-week version of the allocation, used as a reference."""
    days = capacity.active_days(rotation_order(today))
    weekly_total = capacity.total
    per_day = {day: 0 for day in Weekday}
    remaining = needed
    week = 0
    while remaining > 0:
        placed = {day: 0 for day in days}
        if week == 0:
            for day in days:
                amount = min(capacity.for_day(day), remaining)
                placed[day] += amount
                remaining -= amount
        while remaining > 0:
            progressed = False
            for day in days:
                if remaining and placed[day] < capacity.for_day(day):
                    placed[day] += 1
                    remaining -= 1
                    progressed = True
            if not progressed:
                break
        for day, count in placed.items():
            per_day[day] += count
        week += 1
    assert week == -(-needed // weekly_total)
    return per_day


@pytest.mark.parametrize(
    "capacity",
    [
        WeeklyCapacity(monday=2, tuesday=1, wednesday=2, thursday=1, friday=2),
        WeeklyCapacity(monday=3, saturday=1),
        WeeklyCapacity(**{day.value: 1 for day in Weekday}),
    ],
)
def test_matches_week_by_week_allocation(capacity):
    for today in Weekday:
        for needed in range(1, 60):
            assert allocate(needed, capacity, today).per_day == _allocate_week_by_week(needed, capacity, today)


def test_very_large_need_is_fast(mwf_capacity):
    needed = 9_999_900

    started = time.perf_counter()
    plan = allocate(needed, mwf_capacity, WED)
    elapsed = time.perf_counter() - started

    assert elapsed < 1.0
    # 1,249,987 full weeks, then 4 more round-robin from Thursday
    assert plan.per_day == {
        MON: 2_499_975,
        TUE: 1_249_988,
        WED: 2_499_974,
        THU: 1_249_988,
        FRI: 2_499_975,
        SAT: 0,
        SUN: 0,
    }
    assert plan.total_allocated == needed
    assert (plan.full_weeks, plan.extra_sessions) == (1_249_987, 4)
