from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class AnnualSchedule:
    """Row of the uploaded annual schedule (年間行事予定)."""

    work_date: date
    work_type: str
    event_name: Optional[str] = None


@dataclass(frozen=True)
class SchoolDay:
    """Row of the school calendar: a free-form day type label such as 授業日 or 休日."""

    work_date: date
    day_type: str


@dataclass(frozen=True)
class DayType:
    label: str
    is_work_day: bool
    holiday_name: Optional[str] = None
