from __future__ import annotations

from datetime import date
from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, normalize_mysql_date
from .model import AnnualSchedule, SchoolDay
from .repository import CalendarRepository


class MySQLCalendarRepository(CalendarRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_annual_schedule(self, work_date: date) -> Optional[AnnualSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT work_date, work_type, event_name
                FROM annual_schedules
                WHERE work_date=%s
                LIMIT 1
                """,
                (work_date,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return AnnualSchedule(
                work_date=normalize_mysql_date(r["work_date"]),
                work_type=r.get("work_type") or "",
                event_name=r.get("event_name") or None,
            )

    def get_school_day(self, work_date: date) -> Optional[SchoolDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT work_date, day_type
                FROM school_calendar
                WHERE work_date=%s
                LIMIT 1
                """,
                (work_date,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return SchoolDay(work_date=normalize_mysql_date(r["work_date"]), day_type=r.get("day_type") or "")
