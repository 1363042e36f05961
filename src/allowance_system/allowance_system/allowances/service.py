from __future__ import annotations

import calendar
import logging
import re
from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Iterable, Optional, Sequence

from ..common.validators import require_non_empty, require_non_negative_int
from ..core.constants import DEFAULT_DESTINATION_ID
from ..core.enums import ActivityCode, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..schedules.day_type import classify_day
from ..schedules.model import DayType
from ..schedules.repository import CalendarRepository
from .calculator.base import AllowanceCalculator
from .calculator.master_calculator import MasterAllowanceCalculator
from .calculator.standard_calculator import StandardAllowanceCalculator
from .catalog import normalize_destination_id
from .eligibility import SelectionCheck, can_select_activity
from .model import AllowanceEntry, AmountMaster, AmountMasterEntry, CalculationInput
from .repository import AllowanceRepository, AllowanceTypeRepository
from .validators import validate_custom_activity

logger = logging.getLogger(__name__)

_COMPETITION_DETAIL = re.compile(r"^(.+?)（(.+?)）$")


@dataclass(frozen=True)
class Quote:
    amount: int
    check: SelectionCheck


@dataclass(frozen=True)
class MonthlySummary:
    user_id: str
    year: int
    month: int
    entries: list[AllowanceEntry]
    total_amount: int

    @property
    def count(self) -> int:
        return len(self.entries)


class AllowanceService:
    def __init__(
        self,
        allowance_types: AllowanceTypeRepository,
        allowances: AllowanceRepository,
        calendar_repo: Optional[CalendarRepository] = None,
    ):
        self._allowance_types = allowance_types
        self._allowances = allowances
        self._calendar = calendar_repo

    # --- day type -----------------------------------------------------------

    def day_type(self, work_date: date) -> DayType:
        annual = school_day = None
        if self._calendar:
            annual = self._calendar.get_annual_schedule(work_date)
            if not annual:
                school_day = self._calendar.get_school_day(work_date)
        return classify_day(work_date, annual_schedule=annual, school_day=school_day)

    # --- amounts ------------------------------------------------------------

    def calculator(self) -> AllowanceCalculator:
        """Master-aware calculator when the master has rows, hard-coded rules otherwise."""
        master = AmountMaster(self._allowance_types.list_all())
        if master:
            return MasterAllowanceCalculator(master)
        return StandardAllowanceCalculator()

    def quote(
        self,
        *,
        activity_id: str,
        is_work_day: bool,
        is_driving: bool = False,
        destination_id: str = DEFAULT_DESTINATION_ID,
        is_accommodation: bool = False,
        is_half_day: bool = False,
        custom_amount: Any = None,
        custom_description: Optional[str] = None,
        calculator: Optional[AllowanceCalculator] = None,
    ) -> Quote:
        if not activity_id:
            return Quote(amount=0, check=SelectionCheck(allowed=True))

        check = can_select_activity(activity_id, is_work_day)

        if activity_id == ActivityCode.CUSTOM:
            _, amount = validate_custom_activity(custom_description, custom_amount)
            return Quote(amount=amount, check=check)

        calc = calculator or self.calculator()
        amount = calc.calculate(
            CalculationInput(
                activity_id=activity_id,
                is_driving=bool(is_driving),
                destination_id=normalize_destination_id(destination_id),
                is_work_day=bool(is_work_day),
                is_accommodation=bool(is_accommodation),
                is_half_day=bool(is_half_day),
            )
        )
        return Quote(amount=amount, check=check)

    # --- entries ------------------------------------------------------------

    @staticmethod
    def compose_detail(
        activity_id: str,
        *,
        is_driving: bool,
        destination_detail: str = "",
        competition_name: str = "",
        custom_description: Optional[str] = None,
    ) -> str:
        """Text stored in destination_detail.

        CUSTOM keeps its description; C stores the competition name, followed
        by the destination in full-width brackets when driving.
        """
        if activity_id == ActivityCode.CUSTOM:
            return (custom_description or "").strip()
        if activity_id == ActivityCode.C:
            if is_driving and destination_detail:
                return f"{competition_name}（{destination_detail}）"
            return competition_name
        return destination_detail

    @staticmethod
    def split_competition_detail(detail: str, *, is_driving: bool) -> tuple[str, str]:
        """Inverse of compose_detail for C: (competition name, destination)."""
        match = _COMPETITION_DETAIL.match(detail or "")
        if match and is_driving:
            return match.group(1), match.group(2)
        return detail or "", ""

    def record(
        self,
        *,
        user_id: str,
        work_dates: Iterable[date],
        activity_id: str,
        destination_id: str = DEFAULT_DESTINATION_ID,
        is_driving: bool = False,
        is_accommodation: bool = False,
        is_half_day: bool = False,
        destination_detail: str = "",
        competition_name: str = "",
        custom_amount: Any = None,
        custom_description: Optional[str] = None,
    ) -> list[AllowanceEntry]:
        """Save the same activity for one or more dates, replacing existing entries.

        Every date is validated before anything is written.
        """
        user_id = require_non_empty(user_id or "", "ユーザー")
        if not activity_id:
            raise ValidationError("活動種別を選択してください")
        dates = sorted(set(work_dates))
        if not dates:
            raise ValidationError("日付を選択してください")

        destination_id = normalize_destination_id(destination_id)
        detail = self.compose_detail(
            activity_id,
            is_driving=is_driving,
            destination_detail=destination_detail,
            competition_name=competition_name,
            custom_description=custom_description,
        )
        calc = self.calculator()

        pending: list[AllowanceEntry] = []
        for work_date in dates:
            day = self.day_type(work_date)
            quote = self.quote(
                activity_id=activity_id,
                is_work_day=day.is_work_day,
                is_driving=is_driving,
                destination_id=destination_id,
                is_accommodation=is_accommodation,
                is_half_day=is_half_day,
                custom_amount=custom_amount,
                custom_description=custom_description,
                calculator=calc,
            )
            if not quote.check.allowed:
                raise ValidationError(f"{work_date:%Y-%m-%d}: {quote.check.message}")

            pending.append(
                AllowanceEntry(
                    user_id=user_id,
                    work_date=work_date,
                    activity_id=activity_id,
                    destination_id=destination_id,
                    is_driving=bool(is_driving),
                    is_accommodation=bool(is_accommodation),
                    amount=quote.amount,
                    destination_detail=detail,
                )
            )

        saved = []
        for entry in pending:
            entry_id = self._allowances.replace_for_date(entry)
            saved.append(replace(entry, entry_id=entry_id))
        logger.info("saved %d allowance entries for user %s (%s)", len(saved), user_id, activity_id)
        return saved

    def remove(self, *, user_id: str, work_date: date) -> None:
        if not self._allowances.delete_for_date(user_id=user_id, work_date=work_date):
            raise ValidationError("削除対象の手当が見つかりません")

    def monthly_summary(self, *, user_id: str, year: int, month: int) -> MonthlySummary:
        if not 1 <= int(month) <= 12:
            raise ValidationError("月が不正です")
        start = date(int(year), int(month), 1)
        end = date(int(year), int(month), calendar.monthrange(int(year), int(month))[1])

        entries = list(self._allowances.list_for_period(user_id=user_id, start_date=start, end_date=end))
        entries.sort(key=lambda e: e.work_date)
        return MonthlySummary(
            user_id=user_id,
            year=int(year),
            month=int(month),
            entries=entries,
            total_amount=sum(int(e.amount) for e in entries),
        )

    # --- amount master ------------------------------------------------------

    def list_master(self) -> Sequence[AmountMasterEntry]:
        return self._allowance_types.list_all()

    def update_master_amount(self, *, current_role: Role, code: str, base_amount: Any) -> int:
        if current_role != Role.ADMIN:
            raise AuthorizationError("権限がありません")

        amount = require_non_negative_int(base_amount, "基本金額")
        if not self._allowance_types.get_by_code(code):
            raise ValidationError(f"手当種別 {code} は存在しません")

        if not self._allowance_types.update_base_amount(code=code, base_amount=amount):
            raise ValidationError("基本金額の更新に失敗しました")
        logger.info("allowance master %s set to %d", code, amount)
        return amount
