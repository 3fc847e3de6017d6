from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction

from .strategies.base import ProjectionStrategy
from .strategies.deficit_strategy import DeficitStrategy
from .strategies.surplus_strategy import SurplusStrategy


@dataclass
class ProjectionStrategyFactory:
    """Factory Pattern: choose the projection by comparing current with target."""

    def for_standing(self, *, current: Fraction, target: Fraction) -> ProjectionStrategy:
        if current >= target:
            return SurplusStrategy()
        return DeficitStrategy()
