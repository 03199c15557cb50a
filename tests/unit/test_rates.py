"""Unit tests for period income, stress multiplier and work-time conversion"""

import pytest
from paycheck_insights.domain.models import UserSettings
from paycheck_insights.domain.rates import (
    hours_for_frequency,
    income_for_period,
    hourly_rate_from_income,
    stress_multiplier,
    work_time,
    monthly_cost,
)
from paycheck_insights.domain.exceptions import InvalidArgumentError


def test_hours_for_frequency():
    assert hours_for_frequency("weekly") == 40
    assert hours_for_frequency("biweekly") == 80
    assert hours_for_frequency("monthly") == 160


def test_hours_for_unknown_frequency():
    with pytest.raises(InvalidArgumentError):
        hours_for_frequency("daily")


def test_income_for_period_defaults():
    """$30/h biweekly → 2400"""
    assert income_for_period(UserSettings()) == 2400


def test_income_for_period_by_frequency():
    assert income_for_period(UserSettings(hourly_wage=25, pay_frequency="weekly")) == 1000
    assert income_for_period(UserSettings(hourly_wage=25, pay_frequency="monthly")) == 4000


def test_income_for_period_zero_wage():
    assert income_for_period(UserSettings(hourly_wage=0)) == 0


def test_hourly_rate_from_income():
    assert hourly_rate_from_income(2400, "biweekly") == 30
    assert hourly_rate_from_income(0) is None


def test_stress_multiplier_range():
    assert stress_multiplier(10) == pytest.approx(1.0)
    assert stress_multiplier(7) == pytest.approx(1.3)
    assert stress_multiplier(1) == pytest.approx(1.9)


def test_stress_multiplier_clamps_out_of_range_satisfaction():
    """Stored values outside 1-10 must not leak into the multiplier"""
    assert stress_multiplier(0) == pytest.approx(1.9)
    assert stress_multiplier(-5) == pytest.approx(1.9)
    assert stress_multiplier(15) == pytest.approx(1.0)


def test_work_time():
    """$150 at $30/h with ×1.3 stress → 6.5h"""
    assert work_time(150, 30, 1.3) == pytest.approx(6.5)
    assert work_time(150, 30) == pytest.approx(5.0)


def test_work_time_undefined_without_wage():
    assert work_time(150, 0, 1.3) is None
    assert work_time(150, -10) is None


def test_monthly_cost():
    assert monthly_cost(11.99, "monthly") == 11.99
    assert monthly_cost(120, "yearly") == pytest.approx(10.0)


def test_monthly_cost_unknown_cadence():
    with pytest.raises(InvalidArgumentError):
        monthly_cost(10, "weekly")


def test_work_time_rejects_nan_wage():
    with pytest.raises(InvalidArgumentError):
        work_time(150, float("nan"))
