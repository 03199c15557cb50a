"""Unit tests for single-item purchase evaluation"""

import pytest
from paycheck_insights.domain.models import UserSettings
from paycheck_insights.domain.purchases import evaluate_purchase, life_cost_equivalents
from paycheck_insights.domain.exceptions import InvalidArgumentError


def test_life_cost_equivalents_cad():
    life = life_cost_equivalents(850, "CAD")

    assert life.groceries_weeks == pytest.approx(850 / 160)
    assert life.flights == pytest.approx(850 / 450)
    assert life.rent_months == pytest.approx(0.5)


def test_life_cost_equivalents_other_currency():
    life = life_cost_equivalents(700, "usd")

    assert life.groceries_weeks == pytest.approx(700 / 120)
    assert life.rent_months == pytest.approx(0.5)


def test_evaluate_purchase_defaults():
    """$300 at $30/h, satisfaction 7 → 10h × 1.3 stress"""
    evaluation = evaluate_purchase(300, UserSettings())

    assert evaluation.stress_multiplier == pytest.approx(1.3)
    assert evaluation.work_time_hours == pytest.approx(13.0)
    assert evaluation.freedom_days == pytest.approx(1.25)
    assert evaluation.split.invest_year2 == pytest.approx(300 * 1.08 ** 2)


def test_evaluate_purchase_uses_expected_return():
    evaluation = evaluate_purchase(500, UserSettings(expected_annual_return=0.05))

    assert evaluation.split.annual_rate == 0.05
    assert evaluation.split.invest_year1 == pytest.approx(525.0)


def test_evaluate_purchase_without_wage():
    evaluation = evaluate_purchase(300, UserSettings(hourly_wage=0))

    assert evaluation.work_time_hours is None
    assert evaluation.freedom_days == float("inf")


def test_evaluate_purchase_rejects_negative_price():
    with pytest.raises(InvalidArgumentError):
        evaluate_purchase(-5, UserSettings())
