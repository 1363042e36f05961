from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AmountMasterEntry
from .repository import AllowanceTypeRepository


def _to_entry(r: dict) -> AmountMasterEntry:
    return AmountMasterEntry(
        code=r["code"],
        base_amount=int(r.get("base_amount") or 0),
        display_name=r.get("display_name"),
        requires_holiday=bool(r.get("requires_holiday")),
    )


class MySQLAllowanceTypeRepository(AllowanceTypeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AmountMasterEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT code, display_name, base_amount, requires_holiday
                FROM allowance_types
                ORDER BY code
                """
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def get_by_code(self, code: str) -> Optional[AmountMasterEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT code, display_name, base_amount, requires_holiday
                FROM allowance_types
                WHERE code=%s
                """,
                (code,),
            )
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def update_base_amount(self, *, code: str, base_amount: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE allowance_types SET base_amount=%s WHERE code=%s",
                (int(base_amount), code),
            )
            return cur.rowcount > 0
