"""Unit tests for ghost cart valuation and the two-year split comparison"""

import math
import pytest
from datetime import date, datetime
from paycheck_insights.domain.models import GhostCartItem
from paycheck_insights.domain.ghost_cart import (
    months_elapsed,
    simulated_value,
    growth,
    retirement_days_impact,
    value_ghost_cart,
    resale_value_after_two_years,
    invested_value_after_two_years,
    split_comparison,
)
from paycheck_insights.domain.exceptions import InvalidArgumentError


def test_months_elapsed_ignores_day_of_month():
    assert months_elapsed(date(2024, 1, 31), date(2024, 2, 1)) == 1
    assert months_elapsed(date(2024, 1, 1), date(2024, 1, 31)) == 0
    assert months_elapsed(date(2022, 6, 15), date(2024, 6, 1)) == 24


def test_months_elapsed_never_negative():
    assert months_elapsed(date(2024, 6, 1), date(2024, 1, 1)) == 0


def test_months_elapsed_accepts_timestamps():
    assert months_elapsed(datetime(2023, 12, 31, 23, 59), date(2024, 3, 1)) == 3


def test_simulated_value_monthly_compounding():
    """1000 at 12% for 12 months = 1000 × 1.01^12 ≈ 1126.83"""
    assert simulated_value(1000, 0.12, 12) == pytest.approx(1126.83, abs=0.01)


def test_simulated_value_is_pure():
    assert simulated_value(1000, 0.12, 12) == simulated_value(1000, 0.12, 12)


def test_simulated_value_zero_months():
    assert simulated_value(500, 0.08, 0) == 500


def test_simulated_value_rejects_negative_principal():
    with pytest.raises(InvalidArgumentError):
        simulated_value(-1, 0.08, 12)


def test_ghost_item_two_years_at_eight_percent():
    value = simulated_value(500, 0.08, 24)

    assert value == pytest.approx(586.44, abs=0.01)
    assert growth(value, 500) == pytest.approx(86.44, abs=0.01)


def test_retirement_days_impact():
    """$480 at $30/h = 2 full 8-hour days"""
    assert retirement_days_impact(480, 30) == pytest.approx(2.0)
    assert retirement_days_impact(480, 0) == math.inf


def test_value_ghost_cart(sample_ghost_cart, today):
    summary = value_ghost_cart(sample_ghost_cart, 0.08, today, hourly_wage=30)

    headphones, sneakers = summary.items
    assert headphones.item_id == "headphones"
    assert headphones.months_elapsed == 24
    assert headphones.invested_value == pytest.approx(500 * (1 + 0.08 / 12) ** 24)
    assert sneakers.months_elapsed == 0
    assert sneakers.growth == 0

    assert summary.original_total == 620
    assert summary.current_total == pytest.approx(headphones.invested_value + 120)
    assert summary.growth_bonus == pytest.approx(headphones.growth)
    assert summary.expected_annual_return == 0.08


def test_value_ghost_cart_is_replayable(sample_ghost_cart, today):
    """Recomputing from the same snapshot yields identical results"""
    first = value_ghost_cart(sample_ghost_cart, 0.08, today)
    second = value_ghost_cart(sample_ghost_cart, 0.08, today)

    assert first == second


def test_value_ghost_cart_empty(today):
    summary = value_ghost_cart([], 0.08, today)

    assert summary.items == []
    assert summary.current_total == 0
    assert summary.growth_bonus == 0


def test_value_ghost_cart_without_wage_has_infinite_days(today):
    summary = value_ghost_cart([GhostCartItem(price=100, ghosted_at=today)], 0.08, today)

    assert summary.items[0].retirement_days == math.inf


def test_resale_value_after_two_years():
    year1, year2 = resale_value_after_two_years(500)

    assert year1 == pytest.approx(325.0)
    assert year2 == pytest.approx(276.25)


def test_invested_value_compounds_annually():
    year1, year2 = invested_value_after_two_years(500, 0.08)

    assert year1 == pytest.approx(540.0)
    assert year2 == pytest.approx(583.20)


def test_split_comparison():
    split = split_comparison(500)

    assert split.resale_year2 == pytest.approx(276.25)
    assert split.invest_year2 == pytest.approx(583.20)
    assert split.opportunity_delta == pytest.approx(306.95)
    assert split.annual_rate == 0.08


def test_split_comparison_differs_from_monthly_compounding():
    """Annual and monthly conventions are separate features with different figures"""
    split = split_comparison(500, 0.08)

    assert split.invest_year2 != pytest.approx(simulated_value(500, 0.08, 24))


def test_simulated_value_rejects_unrepresentable_horizon():
    """Centuries of compounding at 100% overflows a float"""
    with pytest.raises(InvalidArgumentError):
        simulated_value(10, 1.0, 9900)


def test_retirement_days_impact_rejects_nan_wage():
    with pytest.raises(InvalidArgumentError):
        retirement_days_impact(480, math.nan)
