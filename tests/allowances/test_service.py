from __future__ import annotations

from datetime import date

import pytest

from src.allowance_system.allowance_system.allowances.calculator.master_calculator import MasterAllowanceCalculator
from src.allowance_system.allowance_system.allowances.calculator.standard_calculator import StandardAllowanceCalculator
from src.allowance_system.allowance_system.allowances.model import AmountMasterEntry
from src.allowance_system.allowance_system.allowances.service import AllowanceService
from src.allowance_system.allowance_system.core.enums import Role
from src.allowance_system.allowance_system.core.exceptions import AuthorizationError, ValidationError
from src.allowance_system.allowance_system.schedules.model import AnnualSchedule, SchoolDay
from tests.fakes import InMemoryAllowances, InMemoryAllowanceTypes, InMemoryCalendar

WEDNESDAY = date(2026, 6, 10)
SATURDAY = date(2026, 6, 13)
SUNDAY = date(2026, 6, 14)


def make_service(master=None, calendar=None):
    allowances = InMemoryAllowances()
    svc = AllowanceService(InMemoryAllowanceTypes(master), allowances, calendar or InMemoryCalendar())
    return svc, allowances


def test_calculator_depends_on_master_rows():
    svc, _ = make_service()
    assert isinstance(svc.calculator(), StandardAllowanceCalculator)

    svc, _ = make_service([AmountMasterEntry("A", 3000)])
    assert isinstance(svc.calculator(), MasterAllowanceCalculator)


def test_quote_uses_master_amounts():
    svc, _ = make_service([AmountMasterEntry("A", 3000)])
    quote = svc.quote(activity_id="A", is_work_day=False)
    assert quote.amount == 3000
    assert quote.check.allowed is True


def test_quote_without_master_uses_legacy_other_rate():
    svc, _ = make_service()
    assert svc.quote(activity_id="OTHER", is_work_day=True).amount == 6000


def test_quote_reports_ineligible_selection():
    svc, _ = make_service()
    quote = svc.quote(activity_id="B", is_work_day=True)
    assert quote.amount == 0
    assert quote.check.allowed is False
    assert "休日のみ" in quote.check.message


def test_quote_without_activity_is_zero():
    svc, _ = make_service()
    assert svc.quote(activity_id="", is_work_day=True).amount == 0


def test_quote_custom_activity_uses_entered_amount():
    svc, _ = make_service()
    assert svc.quote(activity_id="CUSTOM", is_work_day=True, custom_amount=4200, custom_description="校外清掃").amount == 4200
    with pytest.raises(ValidationError):
        svc.quote(activity_id="CUSTOM", is_work_day=True, custom_amount=4200, custom_description="")


def test_day_type_prefers_annual_schedule():
    calendar = InMemoryCalendar(
        annual=[AnnualSchedule(SATURDAY, "A", "学校公開")],
        school=[SchoolDay(SATURDAY, "休日")],
    )
    svc, _ = make_service(calendar=calendar)
    day = svc.day_type(SATURDAY)
    assert day.label == "勤務日(学校公開)"
    assert day.is_work_day is True


def test_record_saves_one_entry_per_date_with_per_day_amount():
    svc, repo = make_service()
    saved = svc.record(
        user_id="u1",
        work_dates=[SATURDAY, WEDNESDAY, SATURDAY],
        activity_id="E",
        destination_id="inside_short",
        is_driving=True,
        destination_detail="鶴岡市",
    )
    assert [e.work_date for e in saved] == [WEDNESDAY, SATURDAY]
    assert [e.amount for e in saved] == [2700, 2400]
    assert all(e.entry_id for e in saved)
    assert saved[0].destination_detail == "鶴岡市"
    assert len(repo.list_for_period(user_id="u1", start_date=WEDNESDAY, end_date=SUNDAY)) == 2


def test_record_rejects_holiday_only_activity_on_work_day_without_writing():
    svc, repo = make_service()
    with pytest.raises(ValidationError) as exc:
        svc.record(user_id="u1", work_dates=[SATURDAY, WEDNESDAY], activity_id="A")
    assert "2026-06-10" in str(exc.value)
    assert repo.list_for_period(user_id="u1", start_date=WEDNESDAY, end_date=SUNDAY) == []


def test_record_uses_school_calendar_for_eligibility():
    calendar = InMemoryCalendar(school=[SchoolDay(SATURDAY, "授業日")])
    svc, _ = make_service(calendar=calendar)
    with pytest.raises(ValidationError):
        svc.record(user_id="u1", work_dates=[SATURDAY], activity_id="A")


def test_record_custom_activity_requires_description_and_amount():
    svc, _ = make_service()
    with pytest.raises(ValidationError):
        svc.record(user_id="u1", work_dates=[WEDNESDAY], activity_id="CUSTOM", custom_amount=0, custom_description="x")

    saved = svc.record(
        user_id="u1",
        work_dates=[WEDNESDAY],
        activity_id="CUSTOM",
        custom_amount="3500",
        custom_description="地域行事支援",
    )
    assert saved[0].amount == 3500
    assert saved[0].destination_detail == "地域行事支援"


def test_record_requires_activity_and_dates():
    svc, _ = make_service()
    with pytest.raises(ValidationError):
        svc.record(user_id="u1", work_dates=[WEDNESDAY], activity_id="")
    with pytest.raises(ValidationError):
        svc.record(user_id="u1", work_dates=[], activity_id="D")


def test_record_normalizes_legacy_destination():
    svc, _ = make_service()
    saved = svc.record(user_id="u1", work_dates=[SUNDAY], activity_id="D", destination_id="kengai", is_driving=True)
    assert saved[0].destination_id == "outside"
    assert saved[0].amount == 15000


def test_quote_matches_saved_amount_for_legacy_destination():
    svc, _ = make_service()
    quoted = svc.quote(activity_id="D", is_work_day=True, is_driving=True, destination_id="kengai")
    saved = svc.record(user_id="u1", work_dates=[WEDNESDAY], activity_id="D", destination_id="kengai", is_driving=True)
    assert quoted.amount == saved[0].amount == 15000
    assert svc.quote(activity_id="D", is_work_day=True, is_driving=True, destination_id="kennai_long").amount == 7500


def test_compose_and_split_competition_detail():
    detail = AllowanceService.compose_detail("C", is_driving=True, destination_detail="山形市", competition_name="県総体")
    assert detail == "県総体（山形市）"
    assert AllowanceService.split_competition_detail(detail, is_driving=True) == ("県総体", "山形市")
    assert AllowanceService.split_competition_detail(detail, is_driving=False) == (detail, "")
    assert AllowanceService.compose_detail("C", is_driving=False, destination_detail="山形市", competition_name="県総体") == "県総体"
    assert AllowanceService.compose_detail("D", is_driving=True, destination_detail="酒田市") == "酒田市"


def test_remove_entry():
    svc, _ = make_service()
    svc.record(user_id="u1", work_dates=[SUNDAY], activity_id="B")
    svc.remove(user_id="u1", work_date=SUNDAY)
    with pytest.raises(ValidationError):
        svc.remove(user_id="u1", work_date=SUNDAY)


def test_monthly_summary_totals_entries_in_month():
    svc, _ = make_service()
    svc.record(user_id="u1", work_dates=[SUNDAY, SATURDAY], activity_id="A")
    svc.record(user_id="u1", work_dates=[date(2026, 7, 4)], activity_id="B")
    svc.record(user_id="u2", work_dates=[SUNDAY], activity_id="B")

    summary = svc.monthly_summary(user_id="u1", year=2026, month=6)
    assert summary.count == 2
    assert summary.total_amount == 4800
    assert [e.work_date for e in summary.entries] == [SATURDAY, SUNDAY]

    with pytest.raises(ValidationError):
        svc.monthly_summary(user_id="u1", year=2026, month=13)


def test_update_master_amount_is_admin_only():
    svc, _ = make_service([AmountMasterEntry("G", 3400)])
    with pytest.raises(AuthorizationError):
        svc.update_master_amount(current_role=Role.STAFF, code="G", base_amount=3600)

    assert svc.update_master_amount(current_role=Role.ADMIN, code="G", base_amount="3600") == 3600
    assert svc.quote(activity_id="G", is_work_day=True).amount == 3600


def test_update_master_amount_validation():
    svc, _ = make_service([AmountMasterEntry("G", 3400)])
    with pytest.raises(ValidationError):
        svc.update_master_amount(current_role=Role.ADMIN, code="Z", base_amount=100)
    with pytest.raises(ValidationError):
        svc.update_master_amount(current_role=Role.ADMIN, code="G", base_amount=-1)
