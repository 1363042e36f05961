"""Entry points of the stipend rule engine.

Pure functions over the static catalog; safe to call from anywhere. The amount
master is passed in per call and never cached.
"""
from __future__ import annotations

from typing import Iterable

from .calculator.master_calculator import MasterAllowanceCalculator
from .calculator.standard_calculator import StandardAllowanceCalculator
from .eligibility import SelectionCheck, can_select_activity
from .model import CalculationInput, MasterRecord

__all__ = [
    "SelectionCheck",
    "can_select_activity",
    "calculate_amount",
    "calculate_amount_from_master",
]

_standard = StandardAllowanceCalculator()


def calculate_amount_from_master(
    activity_id: str,
    is_driving: bool,
    destination_id: str,
    is_work_day: bool,
    is_accommodation: bool = False,
    is_half_day: bool = False,
    allowance_types: Iterable[MasterRecord] = (),
) -> int:
    calculator = MasterAllowanceCalculator(allowance_types)
    return calculator.calculate(
        CalculationInput(
            activity_id=activity_id,
            is_driving=is_driving,
            destination_id=destination_id,
            is_work_day=is_work_day,
            is_accommodation=is_accommodation,
            is_half_day=is_half_day,
        )
    )


def calculate_amount(
    activity_id: str,
    is_driving: bool,
    destination_id: str,
    is_work_day: bool,
    is_accommodation: bool = False,
    is_half_day: bool = False,
) -> int:
    return _standard.calculate(
        CalculationInput(
            activity_id=activity_id,
            is_driving=is_driving,
            destination_id=destination_id,
            is_work_day=is_work_day,
            is_accommodation=is_accommodation,
            is_half_day=is_half_day,
        )
    )
