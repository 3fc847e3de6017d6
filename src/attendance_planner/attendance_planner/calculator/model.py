from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..allocation.model import AllocationPlan, WeeklyCapacity
from ..core.enums import ProjectionKind, Weekday
from ..projection.model import ProjectionResult, Surplus


def _plural(count: int, singular: str, plural: str) -> str:
    return singular if count == 1 else plural


def _fmt_percent(value: float) -> str:
    return f"{value:.2f}"


def _fmt_target(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class CalculationReport:
    """Read-model for the calculator screen (projection + optional day plan)."""

    projection: ProjectionResult
    target_percent: float
    today: Weekday
    plan: Optional[AllocationPlan] = None
    capacity: Optional[WeeklyCapacity] = None

    @property
    def kind(self) -> ProjectionKind:
        return self.projection.kind

    def headline(self) -> str:
        target = _fmt_target(self.target_percent)
        p = self.projection
        if isinstance(p, Surplus):
            noun = _plural(p.missable, "class", "classes")
            return f"You can safely miss {p.missable} more {noun} while maintaining {target}% attendance!"
        noun = _plural(p.needed, "class", "classes")
        return f"You need {p.needed} more {noun} to reach {target}% attendance."

    def weeks_summary(self) -> Optional[str]:
        plan = self.plan
        if plan is None or plan.is_empty:
            return None
        parts = []
        if plan.full_weeks > 0:
            parts.append(f"{plan.full_weeks} full {_plural(plan.full_weeks, 'week', 'weeks')}")
        if plan.extra_sessions > 0:
            parts.append(f"{plan.extra_sessions} extra {_plural(plan.extra_sessions, 'class', 'classes')}")
        return " + ".join(parts)

    def to_ui(self) -> dict:
        p = self.projection
        out: dict = {
            "type": "positive" if isinstance(p, Surplus) else "negative",
            "kind": p.kind.value,
            "percentage": _fmt_percent(p.current_percent),
            "target": _fmt_target(self.target_percent),
            "current_day": self.today.value,
            "message": self.headline(),
        }
        if isinstance(p, Surplus):
            out["classes"] = p.missable
        else:
            out.update(
                {
                    "classes_needed": p.needed,
                    "new_total": p.new_total,
                    "new_percentage": _fmt_percent(p.new_percent),
                    "new_total_message": f"New total: {p.new_total} classes → {_fmt_percent(p.new_percent)}%",
                }
            )
        if self.plan is not None:
            out.update(
                {
                    "total_added_classes": self.plan.total_allocated,
                    "full_weeks": self.plan.full_weeks,
                    "remaining_classes": self.plan.extra_sessions,
                    "weeks_message": self.weeks_summary(),
                    "slot_breakdown": {day.value: count for day, count in self.plan.per_day.items()},
                    "schedule": [
                        {"day": day.value, "label": day.label, "classes": count}
                        for day, count in self.plan.breakdown()
                    ],
                }
            )
        if self.capacity is not None:
            out["weekly_capacity"] = self.capacity.as_dict()
            out["weekly_total"] = self.capacity.total
        return out
