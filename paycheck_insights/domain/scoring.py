"""Financial health scoring and subscription danger classification"""

import math
from datetime import date
from typing import Dict, Iterable, Optional

from paycheck_insights.domain.ghost_cart import months_elapsed
from paycheck_insights.domain.models import (
    Subscription,
    SubscriptionInsight,
    SubscriptionPortfolio,
    Timestamp,
)
from paycheck_insights.domain.rates import monthly_cost
from paycheck_insights.utils.date_utils import FRIDAY, days_until_weekday
from paycheck_insights.utils.numeric import clamp

# Monthly cost (user's currency) at which an unused subscription is flagged
DANGER_COST_THRESHOLD = 8.0

SPEND_PENALTY_MAX = 70.0
REMAINING_BONUS_MAX = 20.0


def health_score(income: float, spent: float, remaining: float) -> float:
    """
    Calculate financial health score from 0 (critical) to 100 (strong).

    Scoring:
    - Start at 100
    - Subtract spend_rate × 70, capped to [0, 70]
    - Add remaining_rate × 20, capped to [0, 20]
    - Clamp the result to [0, 100]

    Both rates are relative to income. With no income neither rate applies,
    so the score is 100 whatever was spent.
    """
    spend_rate = spent / income if income > 0 else 0.0
    remaining_rate = remaining / income if income > 0 else 0.0

    score = 100.0
    score -= clamp(spend_rate * SPEND_PENALTY_MAX, 0.0, SPEND_PENALTY_MAX)
    score += clamp(remaining_rate * REMAINING_BONUS_MAX, 0.0, REMAINING_BONUS_MAX)

    return clamp(score, 0.0, 100.0)


def score_label(score: float) -> str:
    """
    Map health score to a display band.

    - 80+:     strong
    - 60 - 80: okay
    - 40 - 60: risky
    - < 40:    critical
    """
    if score >= 80:
        return "strong"
    elif score >= 60:
        return "okay"
    elif score >= 40:
        return "risky"
    else:
        return "critical"


def forecast_to_date(avg_daily_spend: float, remaining: float, days_ahead: int) -> float:
    """Projected remaining budget after days_ahead days; negative means overdraft"""
    return remaining - avg_daily_spend * days_ahead


def days_until_next_friday(today: date) -> int:
    return days_until_weekday(today, FRIDAY)


def is_danger_subscription(monthly_uses: int, monthly_cost: float) -> bool:
    return monthly_uses == 0 and monthly_cost >= DANGER_COST_THRESHOLD


def cost_per_use(monthly_cost: float, monthly_uses: int) -> float:
    """Monthly cost divided by uses; math.inf when the subscription is never used"""
    if monthly_uses > 0:
        return monthly_cost / monthly_uses
    return math.inf


def evaluate_subscriptions(
    subscriptions: Iterable[Subscription],
    uses_by_id: Optional[Dict[str, int]],
    as_of: Timestamp,
    cut_pct: float = 0.0,
) -> SubscriptionPortfolio:
    """
    Per-subscription usage economics plus portfolio totals.

    Args:
        subscriptions: Current subscriptions
        uses_by_id: Self-reported monthly uses keyed by subscription_id (missing = 0)
        as_of: Reference date for "months so far"
        cut_pct: Share of the monthly total the user plans to cut, 0-100

    Returns:
        SubscriptionPortfolio; savings = monthly_total × cut_pct / 100
    """
    uses_by_id = uses_by_id or {}
    items = []
    for sub in subscriptions:
        m_cost = monthly_cost(sub.amount, sub.cadence)
        months_so_far = months_elapsed(sub.created_at, as_of)
        uses = uses_by_id.get(sub.subscription_id, 0) if sub.subscription_id else 0

        items.append(
            SubscriptionInsight(
                subscription=sub,
                monthly_cost=m_cost,
                months_so_far=months_so_far,
                spend_so_far=m_cost * months_so_far,
                uses=uses,
                cost_per_use=cost_per_use(m_cost, uses),
                unused=uses == 0,
                danger=is_danger_subscription(uses, m_cost),
            )
        )

    monthly_total = sum(i.monthly_cost for i in items)

    return SubscriptionPortfolio(
        items=items,
        monthly_total=monthly_total,
        lifetime_total=sum(i.spend_so_far for i in items),
        danger_count=sum(1 for i in items if i.danger),
        savings=monthly_total * clamp(cut_pct, 0.0, 100.0) / 100,
    )
