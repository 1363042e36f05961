from __future__ import annotations

from datetime import date
from typing import Optional

from .holidays import holiday_name
from .model import AnnualSchedule, DayType, SchoolDay

WORK_DAY_LABEL = "勤務日"
HOLIDAY_LABEL = "休日"

_WORK_TYPES = {"A", "B", "C"}
_OFF_TYPES = {"休", "祝"}


def is_weekend(d: date) -> bool:
    return d.weekday() >= 5


def is_work_day_label(label: str) -> bool:
    """A label is a work day unless it mentions 休日; 勤務日 or 授業 must be present."""
    if HOLIDAY_LABEL in label:
        return False
    return WORK_DAY_LABEL in label or "授業" in label


def classify_day(
    work_date: date,
    *,
    annual_schedule: Optional[AnnualSchedule] = None,
    school_day: Optional[SchoolDay] = None,
) -> DayType:
    """Classify a date as work day or holiday.

    Sources in priority order: the annual schedule, the school calendar, then
    weekends and national holidays (marked provisional with 仮).
    """
    holiday = holiday_name(work_date)
    off = holiday is not None or is_weekend(work_date)

    if annual_schedule:
        work_type = (annual_schedule.work_type or "").strip().upper()
        if work_type in _WORK_TYPES:
            label = WORK_DAY_LABEL
        elif work_type in _OFF_TYPES:
            label = HOLIDAY_LABEL
        else:
            label = HOLIDAY_LABEL if off else WORK_DAY_LABEL
        if annual_schedule.event_name:
            label += f"({annual_schedule.event_name})"
    elif school_day:
        label = school_day.day_type
        # National holidays win over the school calendar.
        if holiday and HOLIDAY_LABEL not in label:
            label = f"{HOLIDAY_LABEL}({holiday})"
    elif holiday:
        label = f"{HOLIDAY_LABEL}({holiday})"
    else:
        label = f"{HOLIDAY_LABEL}(仮)" if is_weekend(work_date) else f"{WORK_DAY_LABEL}(仮)"

    return DayType(label=label, is_work_day=is_work_day_label(label), holiday_name=holiday)
