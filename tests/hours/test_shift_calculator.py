from datetime import datetime, timedelta

import pytest

from src.shop_attendance.shop_attendance.hours.calculator.shift_calculator import ShiftHoursCalculator
from src.shop_attendance.shop_attendance.hours.model import WorkedHours, round_hours
from src.shop_attendance.shop_attendance.schedules.policy import LEGACY_POLICY, STANDARD_POLICY

MONDAY = datetime(2026, 2, 2, 8, 0)
SATURDAY = datetime(2026, 2, 7, 8, 0)
SUNDAY = datetime(2026, 2, 8, 8, 0)


@pytest.fixture
def calc():
    return ShiftHoursCalculator(STANDARD_POLICY)


def test_monday_full_shift(calc):
    assert calc.compute(MONDAY, MONDAY.replace(hour=17)) == WorkedHours(8.5, 0.0, 0.0)


def test_monday_short_day_has_debit(calc):
    assert calc.compute(MONDAY, MONDAY.replace(hour=15)) == WorkedHours(6.5, 0.0, 2.0)


def test_saturday_overtime(calc):
    assert calc.compute(SATURDAY, SATURDAY.replace(hour=15)) == WorkedHours(6.0, 1.0, 0.0)


def test_sunday_is_all_extra(calc):
    assert calc.compute(SUNDAY, SUNDAY.replace(hour=12)) == WorkedHours(0.0, 4.0, 0.0)


@pytest.mark.parametrize("start,shift", [(MONDAY, 8.5), (SATURDAY, 6.0), (SUNDAY, 0.0)])
def test_zero_length_span_is_full_debit(calc, start, shift):
    assert calc.compute(start, start) == WorkedHours(0.0, 0.0, shift)


def test_check_out_before_check_in_counts_as_zero(calc):
    assert calc.compute(MONDAY, MONDAY - timedelta(hours=2)) == WorkedHours(0.0, 0.0, 8.5)


def test_span_shorter_than_lunch_nets_zero(calc):
    assert calc.compute(MONDAY, MONDAY + timedelta(minutes=20)) == WorkedHours(0.0, 0.0, 8.5)


def test_normal_plus_debit_stays_at_shift_length(calc):
    for minutes in range(30, 9 * 60 + 1, 45):
        hours = calc.compute(MONDAY, MONDAY + timedelta(minutes=minutes))
        assert hours.extra_hours == 0.0
        assert hours.normal_hours + hours.debit_hours == pytest.approx(8.5)


def test_overtime_keeps_normal_at_shift_length(calc):
    for extra_minutes in (15, 60, 150, 400):
        end = MONDAY + timedelta(hours=9, minutes=extra_minutes)
        hours = calc.compute(MONDAY, end)
        assert hours.normal_hours == 8.5
        assert hours.debit_hours == 0.0
        assert hours.extra_hours == pytest.approx(extra_minutes / 60, abs=0.005)


def test_shift_crossing_midnight_uses_start_day(calc):
    friday_night = datetime(2026, 2, 6, 20, 0)
    hours = calc.compute(friday_night, friday_night + timedelta(hours=10))
    # classified as a weekday (8.5 h shift, 0.5 h lunch), not Saturday
    assert hours == WorkedHours(8.5, 1.0, 0.0)


def test_fractional_hours_are_rounded_to_two_decimals(calc):
    hours = calc.compute(MONDAY, MONDAY + timedelta(hours=8, minutes=20, seconds=24))
    assert hours == WorkedHours(7.84, 0.0, 0.66)


def test_legacy_policy_never_reports_debit():
    calc = ShiftHoursCalculator(LEGACY_POLICY)
    assert calc.compute(MONDAY, MONDAY.replace(hour=15)) == WorkedHours(6.5, 0.0, 0.0)
    assert calc.compute(MONDAY, MONDAY.replace(hour=17)) == WorkedHours(8.0, 0.5, 0.0)


def test_round_hours_goes_half_away_from_zero():
    assert round_hours(0.125) == 0.13
    assert round_hours(2.675) == 2.68
    assert round_hours(6.5) == 6.5
