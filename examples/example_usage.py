"""Example: the calculation layer used directly, without Flask or MySQL."""

from src.attendance_planner.attendance_planner.allocation.model import WeeklyCapacity
from src.attendance_planner.attendance_planner.allocation.planner import allocate
from src.attendance_planner.attendance_planner.core.enums import Weekday
from src.attendance_planner.attendance_planner.projection.model import Deficit
from src.attendance_planner.attendance_planner.projection.projector import project


def main():
    result = project(40, 24, 75)
    print(result)

    if isinstance(result, Deficit):
        capacity = WeeklyCapacity(monday=2, tuesday=1, wednesday=2, thursday=1, friday=2)
        plan = allocate(result.needed, capacity, Weekday.WEDNESDAY)
        for day, count in plan.breakdown():
            print(f"{day.label}: {count}")
        print(f"{plan.full_weeks} full week(s) + {plan.extra_sessions} extra")


if __name__ == "__main__":
    main()
