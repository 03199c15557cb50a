"""Time-value-of-money math: monthly compounding, projection curves, annuities"""

import math
from typing import List

from paycheck_insights.domain.exceptions import InvalidArgumentError
from paycheck_insights.domain.models import ProjectionPoint, ScenarioPoint
from paycheck_insights.utils.numeric import ensure_finite


def monthly_rate(annual_rate: float) -> float:
    """Nominal annual rate compounded monthly"""
    return ensure_finite("annual_rate", annual_rate) / 12


def growth_factor(annual_rate: float, months: int) -> float:
    """(1 + annual_rate/12)^months; a horizon too long to represent is invalid input"""
    try:
        return (1 + monthly_rate(annual_rate)) ** months
    except OverflowError:
        raise InvalidArgumentError(
            f"Growth over {months} months at {annual_rate!r} exceeds the representable range"
        )


def compound_monthly(balance: float, annual_rate: float) -> float:
    """Apply one month of growth to balance"""
    return balance * (1 + monthly_rate(annual_rate))


def project_curve(
    months: int,
    initial: float,
    monthly_contribution: float,
    annual_rate: float,
) -> List[ProjectionPoint]:
    """
    Project a balance forward month by month.

    Each step compounds the running balance for one month, then adds the
    contribution. Negative contributions model withdrawals and are not clamped.

    Args:
        months: Number of monthly steps (0 returns only the starting point)
        initial: Balance at month 0
        monthly_contribution: Amount added after each month's growth
        annual_rate: Nominal annual rate, compounded monthly

    Returns:
        months + 1 points, starting at (0, initial)

    Example:
        project_curve(2, 0, 100, 0.12) → [(0, 0), (1, 100), (2, 201)]
    """
    if months < 0:
        raise InvalidArgumentError(f"months must be >= 0, got {months}")
    ensure_finite("initial", initial)
    ensure_finite("monthly_contribution", monthly_contribution)

    value = initial
    points = [ProjectionPoint(month=0, value=value)]
    for month in range(1, months + 1):
        value = compound_monthly(value, annual_rate) + monthly_contribution
        points.append(ProjectionPoint(month=month, value=value))

    return points


def future_value_of_annuity(monthly: float, annual_rate: float, months: int) -> float:
    """
    Future value of equal end-of-month deposits.

    monthly × ((1 + r)^months − 1) / r with r = annual_rate / 12.
    A zero rate degrades to plain summation (monthly × months).
    """
    if months < 0:
        raise InvalidArgumentError(f"months must be >= 0, got {months}")
    ensure_finite("monthly", monthly)

    r = monthly_rate(annual_rate)
    if r == 0:
        return monthly * months
    value = monthly * (growth_factor(annual_rate, months) - 1) / r
    if not math.isfinite(value):
        raise InvalidArgumentError(f"Annuity value over {months} months is not representable")
    return value


def compare_scenarios(
    months: int,
    annual_rate: float,
    monthly_contribution: float,
    extra_contribution: float = 0.0,
    initial_boost: float = 0.0,
) -> List[ScenarioPoint]:
    """
    Side-by-side curves for the "what if I cut back" chart.

    The base curve starts empty and invests monthly_contribution. The improved
    curve starts at initial_boost (e.g. a skipped purchase) and also invests
    extra_contribution (e.g. cancelled subscriptions) every month.
    """
    base = project_curve(months, 0.0, monthly_contribution, annual_rate)
    improved = project_curve(
        months, initial_boost, monthly_contribution + extra_contribution, annual_rate
    )
    return [
        ScenarioPoint(month=b.month, base=b.value, improved=i.value)
        for b, i in zip(base, improved)
    ]
