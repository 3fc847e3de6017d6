from __future__ import annotations

import pytest

from src.attendance_planner.attendance_planner.allocation.model import WeeklyCapacity
from src.attendance_planner.attendance_planner.calculator.service import CalculatorService
from src.attendance_planner.attendance_planner.capacity.service import WeeklyCapacityService
from src.attendance_planner.attendance_planner.core.enums import ProjectionKind, Weekday
from src.attendance_planner.attendance_planner.core.exceptions import ZeroTotalError


@pytest.fixture
def svc(capacity_repo, mwf_capacity):
    capacity_repo.save("student-1", mwf_capacity)
    return CalculatorService(WeeklyCapacityService(capacity_repo))


def test_surplus_report_has_no_plan(svc, fixed_now):
    report = svc.calculate(100, 90, 75, user_id="student-1", now=fixed_now)

    assert report.kind == ProjectionKind.SURPLUS
    assert report.plan is None
    ui = report.to_ui()
    assert ui["type"] == "positive"
    assert ui["percentage"] == "90.00"
    assert ui["classes"] == 15
    assert ui["message"] == "You can safely miss 15 more classes while maintaining 75% attendance!"


def test_singular_wording(svc, fixed_now):
    report = svc.calculate(20, 16, 75, now=fixed_now)

    assert report.to_ui()["message"] == "You can safely miss 1 more class while maintaining 75% attendance!"


def test_deficit_plan_uses_stored_capacity(svc, fixed_now):
    report = svc.calculate(20, 10, 75, user_id="student-1", now=fixed_now)

    assert report.today == Weekday.WEDNESDAY
    assert report.plan is not None
    assert report.plan.total_allocated == 20

    ui = report.to_ui()
    assert ui["type"] == "negative"
    assert ui["classes_needed"] == 20
    assert ui["message"] == "You need 20 more classes to reach 75% attendance."
    assert ui["weeks_message"] == "2 full weeks + 4 extra classes"
    assert ui["new_total_message"] == "New total: 40 classes → 75.00%"
    assert ui["slot_breakdown"]["friday"] == 5
    assert [row["day"] for row in ui["schedule"]] == ["thursday", "friday", "monday", "tuesday", "wednesday"]


def test_explicit_capacity_overrides_stored(svc, fixed_now):
    report = svc.calculate(20, 10, 75, user_id="student-1", capacity={"saturday": 4}, now=fixed_now)

    assert report.plan.per_day[Weekday.SATURDAY] == 20
    assert report.to_ui()["weeks_message"] == "5 full weeks"


def test_schedule_disabled_skips_plan(svc, fixed_now):
    report = svc.calculate(20, 10, 75, user_id="student-1", use_schedule=False, now=fixed_now)

    assert report.plan is None
    assert "slot_breakdown" not in report.to_ui()


def test_unknown_user_has_no_capacity(svc, fixed_now):
    report = svc.calculate(20, 10, 75, user_id="someone-else", now=fixed_now)

    assert report.plan is None
    assert report.capacity == WeeklyCapacity.empty()


def test_default_target_applies_when_blank(fixed_now):
    report = CalculatorService(default_target=80).calculate(10, 8, None, now=fixed_now)

    assert report.target_percent == 80.0
    assert report.kind == ProjectionKind.SURPLUS


def test_validation_errors_propagate(svc):
    with pytest.raises(ZeroTotalError):
        svc.calculate(0, 0, 75)


def test_deficit_report_exposes_capacity_used(svc, fixed_now, mwf_capacity):
    ui = svc.calculate(20, 10, 75, user_id="student-1", now=fixed_now).to_ui()

    assert ui["weekly_capacity"] == mwf_capacity.as_dict()
    assert ui["weekly_total"] == 8


def test_same_value_update_day_keeps_schedule(capacity_repo):
    service = WeeklyCapacityService(capacity_repo)
    service.save("student-1", {"monday": 2})

    service.update_day("student-1", "mon", 2)
    updated = service.update_day("student-1", "mon", 2)

    assert updated.for_day(Weekday.MONDAY) == 2
