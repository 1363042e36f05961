"""Japanese national holidays (国民の祝日) from 1989 onward.

Covers fixed-date holidays and the move to Happy Monday dates (2000/2003),
the equinoxes (formula valid up to 2099), the Imperial one-off holidays,
the 2020/2021 Olympic moves, substitute holidays (next-day rule before 2007,
next non-holiday from 2007) and the day sandwiched between two holidays.
"""
from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Optional

SUBSTITUTE_HOLIDAY = "振替休日"
CITIZENS_HOLIDAY = "国民の休日"

_FIXED = {
    (1, 1): "元日",
    (2, 11): "建国記念の日",
    (5, 3): "憲法記念日",
    (5, 5): "こどもの日",
    (11, 3): "文化の日",
    (11, 23): "勤労感謝の日",
}

_ONE_OFF = {
    date(1989, 2, 24): "昭和天皇の大喪の礼",
    date(1990, 11, 12): "即位礼正殿の儀",
    date(1993, 6, 9): "皇太子徳仁親王の結婚の儀",
    date(2019, 5, 1): "天皇の即位の日",
    date(2019, 10, 22): "即位礼正殿の儀",
}

_OLYMPIC_MOVES = {
    2020: {date(2020, 7, 23): "海の日", date(2020, 7, 24): "スポーツの日", date(2020, 8, 10): "山の日"},
    2021: {date(2021, 7, 22): "海の日", date(2021, 7, 23): "スポーツの日", date(2021, 8, 8): "山の日"},
}

_CHAINED_SUBSTITUTE_FROM = date(2007, 1, 1)


def _nth_monday(year: int, month: int, n: int) -> date:
    first = date(year, month, 1)
    offset = (0 - first.weekday()) % 7
    return first + timedelta(days=offset + 7 * (n - 1))


def spring_equinox_day(year: int) -> int:
    return math.floor(20.8431 + 0.242194 * (year - 1980)) - math.floor((year - 1980) / 4)


def autumn_equinox_day(year: int) -> int:
    return math.floor(23.2488 + 0.242194 * (year - 1980)) - math.floor((year - 1980) / 4)


def _movable(year: int) -> dict[date, str]:
    if year in _OLYMPIC_MOVES:
        return dict(_OLYMPIC_MOVES[year])

    days = {}
    if year >= 2003:
        days[_nth_monday(year, 7, 3)] = "海の日"
    elif year >= 1996:
        days[date(year, 7, 20)] = "海の日"

    if year >= 2000:
        days[_nth_monday(year, 10, 2)] = "スポーツの日" if year >= 2020 else "体育の日"
    else:
        days[date(year, 10, 10)] = "体育の日"

    if year >= 2016:
        days[date(year, 8, 11)] = "山の日"
    return days


def _base_holiday(d: date) -> Optional[str]:
    name = _FIXED.get((d.month, d.day)) or _ONE_OFF.get(d)
    if name:
        return name

    if d.month == 4 and d.day == 29:
        return "昭和の日" if d.year >= 2007 else "みどりの日"
    if d.month == 5 and d.day == 4 and d.year >= 2007:
        return "みどりの日"

    if d.month == 2 and d.day == 23 and d.year >= 2020:
        return "天皇誕生日"
    if d.month == 12 and d.day == 23 and 1989 <= d.year <= 2018:
        return "天皇誕生日"

    if d == (_nth_monday(d.year, 1, 2) if d.year >= 2000 else date(d.year, 1, 15)):
        return "成人の日"
    if d == (_nth_monday(d.year, 9, 3) if d.year >= 2003 else date(d.year, 9, 15)):
        return "敬老の日"
    if d.month == 3 and d.day == spring_equinox_day(d.year):
        return "春分の日"
    if d.month == 9 and d.day == autumn_equinox_day(d.year):
        return "秋分の日"

    return _movable(d.year).get(d)


def _is_substitute(d: date) -> bool:
    prev = d - timedelta(days=1)
    if d < _CHAINED_SUBSTITUTE_FROM:
        return prev.weekday() == 6 and _base_holiday(prev) is not None

    # A Sunday holiday moves to the next day that is not itself a holiday.
    while _base_holiday(prev):
        if prev.weekday() == 6:
            return True
        prev -= timedelta(days=1)
    return False


def holiday_name(d: date) -> Optional[str]:
    """Holiday name for the date, or None on an ordinary day."""
    name = _base_holiday(d)
    if name:
        return name

    if _is_substitute(d):
        return SUBSTITUTE_HOLIDAY

    if d.weekday() != 6 and _base_holiday(d - timedelta(days=1)) and _base_holiday(d + timedelta(days=1)):
        return CITIZENS_HOLIDAY

    return None


def is_holiday(d: date) -> bool:
    return holiday_name(d) is not None
