from __future__ import annotations

from dataclasses import dataclass

from .allowances.mysql_allowance_repository import MySQLAllowanceRepository
from .allowances.mysql_allowance_type_repository import MySQLAllowanceTypeRepository
from .allowances.service import AllowanceService
from .database.connection import DBConfig, DatabaseConnection
from .schedules.mysql_calendar_repository import MySQLCalendarRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    allowance_types_repo: MySQLAllowanceTypeRepository
    allowances_repo: MySQLAllowanceRepository
    calendar_repo: MySQLCalendarRepository

    allowance_service: AllowanceService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    allowance_types_repo = MySQLAllowanceTypeRepository(conn)
    allowances_repo = MySQLAllowanceRepository(conn)
    calendar_repo = MySQLCalendarRepository(conn)

    allowance_service = AllowanceService(allowance_types_repo, allowances_repo, calendar_repo)

    return Container(
        conn=conn,
        allowance_types_repo=allowance_types_repo,
        allowances_repo=allowances_repo,
        calendar_repo=calendar_repo,
        allowance_service=allowance_service,
    )
