from __future__ import annotations

from datetime import date
from typing import Optional, Protocol

from .model import AnnualSchedule, SchoolDay


class CalendarRepository(Protocol):
    def get_annual_schedule(self, work_date: date) -> Optional[AnnualSchedule]:
        raise NotImplementedError

    def get_school_day(self, work_date: date) -> Optional[SchoolDay]:
        raise NotImplementedError
