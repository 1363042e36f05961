from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .catalog import activity_id_from_label, normalize_destination_id
from .model import AllowanceEntry
from .repository import AllowanceRepository


class MySQLAllowanceRepository(AllowanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def replace_for_date(self, entry: AllowanceEntry) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM allowances WHERE user_id=%s AND work_date=%s",
                (entry.user_id, entry.work_date),
            )
            cur.execute(
                """
                INSERT INTO allowances
                    (user_id, work_date, activity_id, destination_id, destination_detail,
                     is_driving, is_accommodation, amount)
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    entry.user_id,
                    entry.work_date,
                    entry.activity_id,
                    entry.destination_id,
                    entry.destination_detail,
                    int(entry.is_driving),
                    int(entry.is_accommodation),
                    int(entry.amount),
                ),
            )
            return int(cur.lastrowid)

    def delete_for_date(self, *, user_id: str, work_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM allowances WHERE user_id=%s AND work_date=%s",
                (user_id, work_date),
            )
            return cur.rowcount > 0

    def list_for_period(self, *, user_id: str, start_date: date, end_date: date) -> Sequence[AllowanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT allowance_id, user_id, work_date, activity_id, destination_id,
                       destination_detail, is_driving, is_accommodation, amount
                FROM allowances
                WHERE user_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date
                """,
                (user_id, start_date, end_date),
            )
            return [
                AllowanceEntry(
                    entry_id=int(r["allowance_id"]),
                    user_id=r["user_id"],
                    work_date=normalize_mysql_date(r["work_date"]),
                    activity_id=activity_id_from_label(r["activity_id"]),
                    destination_id=normalize_destination_id(r.get("destination_id")),
                    destination_detail=r.get("destination_detail") or "",
                    is_driving=bool(r.get("is_driving")),
                    is_accommodation=bool(r.get("is_accommodation")),
                    amount=int(r.get("amount") or 0),
                )
                for r in fetchall(cur)
            ]
