from __future__ import annotations

from typing import Optional

from ..allocation.model import WeeklyCapacity
from ..core.enums import Weekday
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .repository import WeeklyCapacityRepository

_DAY_COLUMNS = ", ".join(day.value for day in Weekday)


class MySQLWeeklyCapacityRepository(WeeklyCapacityRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load(self, user_id: str) -> Optional[WeeklyCapacity]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_DAY_COLUMNS}
                FROM weekly_capacity
                WHERE user_id=%s
                """,
                (user_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return WeeklyCapacity.from_mapping({day.value: int(r[day.value] or 0) for day in Weekday})

    def save(self, user_id: str, capacity: WeeklyCapacity) -> None:
        values = capacity.as_dict()
        placeholders = ", ".join(["%s"] * len(values))
        updates = ", ".join(f"{day.value}=VALUES({day.value})" for day in Weekday)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO weekly_capacity(user_id, {_DAY_COLUMNS})
                VALUES(%s, {placeholders})
                ON DUPLICATE KEY UPDATE {updates}, last_updated=CURRENT_TIMESTAMP
                """,
                (user_id, *(values[day.value] for day in Weekday)),
            )

    def update_day(self, user_id: str, day: Weekday, sessions: int) -> bool:
        # Column name comes from the Weekday enum, never from user input.
        column = Weekday.parse(day).value
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE weekly_capacity SET {column}=%s, last_updated=CURRENT_TIMESTAMP WHERE user_id=%s",
                (int(sessions), user_id),
            )
            changed = cur.rowcount > 0
        # rowcount is 0 when the stored value is already the same.
        return changed or self.exists(user_id)

    def exists(self, user_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT 1 AS found FROM weekly_capacity WHERE user_id=%s", (user_id,))
            return fetchone(cur) is not None
