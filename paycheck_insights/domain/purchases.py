"""Should-I-buy-it evaluation for a single catalog item at a resolved price"""

from paycheck_insights.domain.ghost_cart import retirement_days_impact, split_comparison
from paycheck_insights.domain.models import LifeCostEquivalents, PurchaseEvaluation, UserSettings
from paycheck_insights.domain.rates import stress_multiplier, work_time
from paycheck_insights.utils.numeric import ensure_non_negative

# (weekly groceries, one-way flight, monthly rent) in local currency units
LIFE_COST_BENCHMARKS = {
    "CAD": (160.0, 450.0, 1700.0),
}
DEFAULT_LIFE_COST_BENCHMARK = (120.0, 350.0, 1400.0)


def life_cost_equivalents(price: float, currency: str) -> LifeCostEquivalents:
    groceries, flight, rent = LIFE_COST_BENCHMARKS.get(currency.upper(), DEFAULT_LIFE_COST_BENCHMARK)
    return LifeCostEquivalents(
        groceries_weeks=price / groceries,
        flights=price / flight,
        rent_months=price / rent,
    )


def evaluate_purchase(price: float, settings: UserSettings) -> PurchaseEvaluation:
    """
    Everything the item detail view shows for a price.

    Work time is scaled by the stress multiplier; freedom days are unscaled
    8-hour workdays. The split comparison uses the user's expected return.
    """
    ensure_non_negative("price", price)
    multiplier = stress_multiplier(settings.job_satisfaction)

    return PurchaseEvaluation(
        price=price,
        stress_multiplier=multiplier,
        work_time_hours=work_time(price, settings.hourly_wage, multiplier),
        freedom_days=retirement_days_impact(price, settings.hourly_wage),
        life_cost=life_cost_equivalents(price, settings.currency),
        split=split_comparison(price, settings.expected_annual_return),
    )
