"""Dashboard and insights composition - one snapshot in, every derived metric out"""

from datetime import date, timedelta
from typing import List

from paycheck_insights.domain.models import (
    DashboardSummary,
    Expense,
    InsightsReport,
    UserSettings,
)
from paycheck_insights.domain.rates import income_for_period, stress_multiplier
from paycheck_insights.domain.scoring import (
    days_until_next_friday,
    forecast_to_date,
    health_score,
    score_label,
)
from paycheck_insights.domain.spending import (
    average_daily,
    category_totals,
    is_weekend_heavier,
    remaining,
    runway_days,
    total_spent,
    velocity_pct,
    weekday_weekend_split,
    windowed_daily_totals,
)
from paycheck_insights.utils.date_utils import window_start


def build_dashboard_summary(
    settings: UserSettings,
    expenses: List[Expense],
    recent_limit: int = 10,
) -> DashboardSummary:
    """Period income against the most recent expenses, newest first"""
    recent = sorted(expenses, key=lambda e: e.date, reverse=True)[:recent_limit]
    income = income_for_period(settings)
    spent = sum(e.amount for e in recent)

    return DashboardSummary(
        income=income,
        spent=spent,
        remaining=remaining(income, spent),
        category_totals=category_totals(recent),
        recent_expenses=recent,
        stress_multiplier=stress_multiplier(settings.job_satisfaction),
    )


def build_insights_report(
    settings: UserSettings,
    expenses: List[Expense],
    today: date,
    lookback_days: int = 30,
    trend_days: int = 7,
) -> InsightsReport:
    """
    Compute the full insights view for one user.

    Flow:
    1. Period income from settings
    2. Spending over the lookback window ending today (signed remaining)
    3. Health score from spend and remaining rates
    4. Current vs previous trend window (daily averages, velocity)
    5. Forecast to next Friday, weekday/weekend pattern, runway
    """
    income = income_for_period(settings)

    lookback_start = window_start(today, lookback_days)
    spent = total_spent(expenses, lookback_start, today)
    left = remaining(income, spent)

    score = health_score(income, spent, left)

    current_start = window_start(today, trend_days)
    last_totals = windowed_daily_totals(expenses, current_start, trend_days)
    prev_totals = windowed_daily_totals(expenses, current_start - timedelta(days=trend_days), trend_days)
    avg_current = average_daily(last_totals)
    avg_previous = average_daily(prev_totals)

    days_to_friday = days_until_next_friday(today)
    split = weekday_weekend_split(expenses, today, lookback_days)

    window_expenses = [e for e in expenses if lookback_start <= e.date <= today]

    return InsightsReport(
        income=income,
        spent=spent,
        remaining=left,
        spend_rate=spent / income if income > 0 else 0.0,
        remaining_rate=left / income if income > 0 else 0.0,
        score=score,
        score_label=score_label(score),
        current_totals=last_totals,
        previous_totals=prev_totals,
        avg_daily_current=avg_current,
        avg_daily_previous=avg_previous,
        velocity_pct=velocity_pct(avg_current, avg_previous),
        days_to_friday=days_to_friday,
        projected_remaining_friday=forecast_to_date(avg_current, left, days_to_friday),
        split=split,
        weekend_heavier=is_weekend_heavier(split),
        runway_days=runway_days(left, avg_current),
        category_totals=category_totals(window_expenses),
    )
