import itertools

import pytest

from src.allowance_system.allowance_system.allowances.calculator.master_calculator import MasterAllowanceCalculator
from src.allowance_system.allowance_system.allowances.catalog import ACTIVITY_TYPES, DESTINATIONS
from src.allowance_system.allowance_system.allowances.model import AmountMaster, AmountMasterEntry, CalculationInput
from src.allowance_system.allowance_system.allowances.rules import calculate_amount, calculate_amount_from_master

DEFAULT_MASTER = [
    {"code": "A", "base_amount": 2400},
    {"code": "B", "base_amount": 1700},
    {"code": "C", "base_amount": 3400},
    {"code": "D", "base_amount": 2400},
    {"code": "E", "base_amount": 2400},
    {"code": "F", "base_amount": 2400},
    {"code": "G", "base_amount": 3400},
    {"code": "Disaster", "base_amount": 6000},
]

FLAGS = list(itertools.product([True, False], repeat=4))


@pytest.mark.parametrize("activity", [a.id for a in ACTIVITY_TYPES])
@pytest.mark.parametrize("destination", [d.id for d in DESTINATIONS])
def test_master_with_default_amounts_matches_standard(activity, destination):
    for is_driving, is_work_day, is_accommodation, is_half_day in FLAGS:
        expected = calculate_amount(activity, is_driving, destination, is_work_day, is_accommodation, is_half_day)
        actual = calculate_amount_from_master(
            activity, is_driving, destination, is_work_day, is_accommodation, is_half_day, DEFAULT_MASTER
        )
        assert actual == expected, (activity, destination, is_driving, is_work_day, is_accommodation, is_half_day)


@pytest.mark.parametrize("activity", [a.id for a in ACTIVITY_TYPES])
def test_empty_master_falls_back_to_defaults(activity):
    for is_driving, is_work_day, is_accommodation, is_half_day in FLAGS:
        assert calculate_amount_from_master(
            activity, is_driving, "inside_short", is_work_day, is_accommodation, is_half_day, []
        ) == calculate_amount(activity, is_driving, "inside_short", is_work_day, is_accommodation, is_half_day)


def test_zero_master_amount_keeps_default():
    master = [{"code": "A", "base_amount": 0}, {"code": "G", "base_amount": None}]
    assert calculate_amount_from_master("A", False, "school", False, allowance_types=master) == 2400
    assert calculate_amount_from_master("G", False, "school", False, allowance_types=master) == 3400


def test_master_overrides_base_amounts():
    master = [
        {"code": "A", "base_amount": 3000},
        {"code": "B", "base_amount": 2000},
        {"code": "C", "base_amount": 4000},
        {"code": "D", "base_amount": 2600},
        {"code": "G", "base_amount": 3600},
        {"code": "Disaster", "base_amount": 8000},
    ]
    assert calculate_amount_from_master("A", False, "school", False, allowance_types=master) == 3000
    assert calculate_amount_from_master("A", False, "school", True, allowance_types=master) == 0
    assert calculate_amount_from_master("B", False, "school", False, allowance_types=master) == 2000
    assert calculate_amount_from_master("C", False, "school", True, allowance_types=master) == 4000
    # Half-day competition uses the half-day club rate.
    assert calculate_amount_from_master("C", False, "school", True, False, True, master) == 2000
    assert calculate_amount_from_master("C", True, "inside_short", True, allowance_types=master) == 4000
    assert calculate_amount_from_master("D", False, "school", True, allowance_types=master) == 2600
    assert calculate_amount_from_master("G", False, "school", True, allowance_types=master) == 3600
    assert calculate_amount_from_master("DISASTER", True, "outside", True, allowance_types=master) == 8000


def test_master_camp_amount_feeds_accommodation_add_on():
    master = [{"code": "F", "base_amount": 3000}, {"code": "E", "base_amount": 2800}]
    assert calculate_amount_from_master("F", True, "outside", True, True, False, master) == 18000
    assert calculate_amount_from_master("F", True, "inside_long", False, True, False, master) == 10500
    assert calculate_amount_from_master("F", True, "school", True, True, False, master) == 8100
    assert calculate_amount_from_master("F", True, "school", False, False, False, master) == 3000
    assert calculate_amount_from_master("F", False, "school", True, False, False, master) == 3000
    assert calculate_amount_from_master("E", False, "outside", True, False, False, master) == 2800


def test_expedition_driving_amounts_ignore_master():
    master = [{"code": "E", "base_amount": 9999}]
    assert calculate_amount_from_master("E", True, "outside", True, allowance_types=master) == 12600
    assert calculate_amount_from_master("E", True, "inside_short", True, allowance_types=master) == 2700
    assert calculate_amount_from_master("E", True, "inside_short", False, allowance_types=master) == 2400


def test_driving_outside_ignores_master_for_other_activities():
    master = [{"code": "D", "base_amount": 9999}]
    assert calculate_amount_from_master("D", True, "outside", True, True, False, master) == 15000


def test_master_has_no_legacy_other_rate():
    assert calculate_amount_from_master("OTHER", False, "school", True, allowance_types=DEFAULT_MASTER) == 0
    assert calculate_amount("OTHER", False, "school", True) == 6000


def test_first_matching_master_entry_wins():
    master = AmountMaster([AmountMasterEntry("A", 2500), AmountMasterEntry("A", 9999)])
    calc = MasterAllowanceCalculator(master)
    inp = CalculationInput(activity_id="A", is_driving=False, destination_id="school", is_work_day=False)
    assert calc.calculate(inp) == 2500


def test_amount_master_lookup():
    master = AmountMaster([{"code": "C", "base_amount": "3500"}, AmountMasterEntry("D", 0)])
    assert len(master) == 2
    assert master.amount_for("C") == 3500
    assert master.amount_for("D") == 0
    assert master.amount_for("X") == 0
    assert not AmountMaster()
