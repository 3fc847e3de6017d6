from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .calculator.service import CalculatorService
from .capacity.mysql_capacity_repository import MySQLWeeklyCapacityRepository
from .capacity.repository import WeeklyCapacityRepository
from .capacity.service import WeeklyCapacityService
from .core.constants import DEFAULT_TARGET_PERCENT
from .database.connection import DBConfig, DatabaseConnection


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    capacity_repo: WeeklyCapacityRepository

    capacity_service: WeeklyCapacityService
    calculator_service: CalculatorService


def build_services(
    capacity_repo: WeeklyCapacityRepository,
    *,
    conn: Optional[DatabaseConnection] = None,
    default_target: float = DEFAULT_TARGET_PERCENT,
) -> Container:
    capacity_service = WeeklyCapacityService(capacity_repo)
    calculator_service = CalculatorService(capacity_service, default_target=default_target)

    return Container(
        conn=conn,
        capacity_repo=capacity_repo,
        capacity_service=capacity_service,
        calculator_service=calculator_service,
    )


def build_container(*, db_config: dict, default_target: float = DEFAULT_TARGET_PERCENT) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return build_services(MySQLWeeklyCapacityRepository(conn), conn=conn, default_target=default_target)
