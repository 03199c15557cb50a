"""Ghost cart valuation - replaying skipped purchases as if the money had been invested"""

import math
from typing import Iterable, Tuple

from paycheck_insights.domain.exceptions import InvalidArgumentError
from paycheck_insights.domain.models import (
    GhostCartItem,
    GhostCartSummary,
    GhostCartValuation,
    SplitComparison,
    Timestamp,
)
from paycheck_insights.domain.time_value import growth_factor
from paycheck_insights.utils.date_utils import calendar_months_between
from paycheck_insights.utils.numeric import ensure_finite, ensure_non_negative

HOURS_PER_WORKDAY = 8

# Resale depreciation for the two-year split comparison
YEAR1_DEPRECIATION = 0.35
YEAR2_DEPRECIATION = 0.15


def months_elapsed(start: Timestamp, end: Timestamp) -> int:
    """Whole calendar months from start to end. Day of month is ignored; never negative."""
    return max(0, calendar_months_between(start, end))


def simulated_value(principal: float, annual_rate: float, months: int) -> float:
    """principal × (1 + annual_rate/12)^months"""
    ensure_non_negative("principal", principal)
    value = principal * growth_factor(annual_rate, months)
    if not math.isfinite(value):
        raise InvalidArgumentError(f"Simulated value of {principal!r} over {months} months is not representable")
    return value


def growth(current_value: float, principal: float) -> float:
    return current_value - principal


def retirement_days_impact(current_value: float, hourly_wage: float) -> float:
    """Full 8-hour workdays the value represents. math.inf when hourly_wage <= 0."""
    ensure_finite("hourly_wage", hourly_wage)
    if hourly_wage <= 0:
        return math.inf
    return current_value / (hourly_wage * HOURS_PER_WORKDAY)


def value_ghost_cart(
    items: Iterable[GhostCartItem],
    annual_rate: float,
    as_of: Timestamp,
    hourly_wage: float = 0.0,
) -> GhostCartSummary:
    """
    Value every ghosted item as of a date.

    Growth is always recomputed from the stored price and ghosted_at date,
    never carried over from a previous valuation.

    Returns:
        GhostCartSummary with per-item valuations (input order) and the totals
        shown in the gallery: original total, current total and growth bonus.
    """
    valuations = []
    for item in items:
        months = months_elapsed(item.ghosted_at, as_of)
        invested = simulated_value(item.price, annual_rate, months)
        valuations.append(
            GhostCartValuation(
                item_id=item.item_id,
                price=item.price,
                months_elapsed=months,
                invested_value=invested,
                growth=growth(invested, item.price),
                retirement_days=retirement_days_impact(invested, hourly_wage),
            )
        )

    original_total = sum(v.price for v in valuations)
    current_total = sum(v.invested_value for v in valuations)

    return GhostCartSummary(
        items=valuations,
        original_total=original_total,
        current_total=current_total,
        growth_bonus=current_total - original_total,
        expected_annual_return=annual_rate,
    )


def resale_value_after_two_years(price: float) -> Tuple[float, float]:
    """Resale value after year 1 (−35%) and year 2 (a further −15%)"""
    ensure_non_negative("price", price)
    year1 = price * (1 - YEAR1_DEPRECIATION)
    year2 = year1 * (1 - YEAR2_DEPRECIATION)
    return year1, year2


def invested_value_after_two_years(price: float, annual_rate: float = 0.08) -> Tuple[float, float]:
    """Lump sum compounded annually (not monthly) for one and two years"""
    ensure_non_negative("price", price)
    ensure_finite("annual_rate", annual_rate)
    return price * (1 + annual_rate), price * (1 + annual_rate) ** 2


def split_comparison(price: float, annual_rate: float = 0.08) -> SplitComparison:
    """
    Buy-and-resell vs invest-instead over two years.

    Example:
        price 500 at 8% → resale year 2 = 276.25, invest year 2 = 583.20,
        opportunity delta = 306.95
    """
    resale_year1, resale_year2 = resale_value_after_two_years(price)
    invest_year1, invest_year2 = invested_value_after_two_years(price, annual_rate)

    return SplitComparison(
        resale_year1=resale_year1,
        resale_year2=resale_year2,
        invest_year1=invest_year1,
        invest_year2=invest_year2,
        opportunity_delta=invest_year2 - resale_year2,
        annual_rate=annual_rate,
    )
