"""Unit tests for time-value math"""

import math
import pytest
from paycheck_insights.domain.time_value import (
    compound_monthly,
    project_curve,
    future_value_of_annuity,
    compare_scenarios,
)
from paycheck_insights.domain.exceptions import InvalidArgumentError


def test_compound_monthly_one_step():
    """12% nominal annual → 1% per month"""
    assert compound_monthly(1000, 0.12) == pytest.approx(1010.0)


def test_project_curve_zero_months_returns_initial_only():
    points = project_curve(0, 250.0, 100.0, 0.08)

    assert len(points) == 1
    assert points[0].month == 0
    assert points[0].value == 250.0


def test_project_curve_compounds_then_contributes():
    """Each month: grow the balance, then add the contribution"""
    points = project_curve(2, 0, 100, 0.12)

    assert [p.month for p in points] == [0, 1, 2]
    assert points[1].value == pytest.approx(100.0)
    assert points[2].value == pytest.approx(201.0)  # 100 × 1.01 + 100


def test_project_curve_zero_rate_is_linear():
    points = project_curve(12, 1000, 50, 0.0)

    assert len(points) == 13
    assert points[-1].value == pytest.approx(1600.0)


def test_project_curve_allows_withdrawals():
    """Negative contributions are not clamped"""
    points = project_curve(3, 100, -50, 0.0)

    assert points[-1].value == pytest.approx(-50.0)


def test_project_curve_is_pure():
    assert project_curve(24, 10, 25, 0.08) == project_curve(24, 10, 25, 0.08)


def test_project_curve_rejects_negative_months():
    with pytest.raises(InvalidArgumentError):
        project_curve(-1, 0, 0, 0.08)


def test_project_curve_rejects_non_finite_rate():
    with pytest.raises(InvalidArgumentError):
        project_curve(3, 0, 10, math.nan)


def test_future_value_of_annuity():
    """100/month at 12% for 12 months ≈ 1268.25"""
    expected = 100 * ((1.01 ** 12 - 1) / 0.01)

    assert future_value_of_annuity(100, 0.12, 12) == pytest.approx(expected)
    assert future_value_of_annuity(100, 0.12, 12) == pytest.approx(1268.25, abs=0.01)


def test_future_value_of_annuity_zero_rate():
    """Zero rate degrades to monthly × months (no division by zero)"""
    assert future_value_of_annuity(100, 0.0, 12) == 1200


def test_annuity_matches_curve_without_initial_balance():
    curve = project_curve(36, 0, 75, 0.08)

    assert curve[-1].value == pytest.approx(future_value_of_annuity(75, 0.08, 36))


def test_compare_scenarios_improved_never_below_base():
    points = compare_scenarios(24, 0.08, 100, extra_contribution=20, initial_boost=500)

    assert len(points) == 25
    assert points[0].base == 0
    assert points[0].improved == 500
    assert all(p.improved >= p.base for p in points)


def test_future_value_of_annuity_rejects_unrepresentable_horizon():
    with pytest.raises(InvalidArgumentError):
        future_value_of_annuity(10, 1.0, 9900)
