from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import AttendanceInput, ProjectionResult


class ProjectionStrategy(ABC):
    """Strategy Pattern: how a validated input turns into a projection."""

    @abstractmethod
    def project(self, data: AttendanceInput) -> ProjectionResult:
        raise NotImplementedError
