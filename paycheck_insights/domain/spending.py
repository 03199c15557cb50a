"""Spending aggregation over expense snapshots - category totals, daily windows, trends"""

import math
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Sequence

from paycheck_insights.domain.models import (
    EXPENSE_CATEGORIES,
    DailyTotal,
    Expense,
    WeekdayWeekendSplit,
)
from paycheck_insights.utils.date_utils import generate_date_range, is_weekend, window_start

WEEKEND_HEAVIER_FACTOR = 1.35


def _totals_by_date(expenses: Iterable[Expense]) -> Dict[date, float]:
    totals: Dict[date, float] = defaultdict(float)
    for expense in expenses:
        totals[expense.date] += expense.amount
    return totals


def category_totals(
    expenses: Iterable[Expense],
    categories: Sequence[str] = EXPENSE_CATEGORIES,
) -> Dict[str, float]:
    """
    Sum spending per category.

    Every category in `categories` is present (zero-filled), in that order.
    Expenses in categories outside the list are ignored.
    """
    totals = {category: 0.0 for category in categories}
    for expense in expenses:
        if expense.category in totals:
            totals[expense.category] += expense.amount
    return totals


def windowed_daily_totals(
    expenses: Iterable[Expense],
    start_date: date,
    num_days: int,
) -> List[DailyTotal]:
    """
    Daily spending for each calendar day in [start_date, start_date + num_days).

    Oldest first, one entry per day, zero-filled for days with no expenses.
    """
    by_date = _totals_by_date(expenses)
    return [
        DailyTotal(date=day, total=by_date.get(day, 0.0))
        for day in generate_date_range(start_date, num_days)
    ]


def total_spent(expenses: Iterable[Expense], start_date: date, end_date: date) -> float:
    """Total spending between start_date and end_date (inclusive)"""
    return sum(e.amount for e in expenses if start_date <= e.date <= end_date)


def average_daily(daily_totals: Sequence[DailyTotal]) -> float:
    if not daily_totals:
        return 0.0
    return sum(d.total for d in daily_totals) / len(daily_totals)


def weekday_weekend_split(
    expenses: Iterable[Expense],
    reference_date: date,
    lookback_days: int,
) -> WeekdayWeekendSplit:
    """
    Average daily spend on weekdays vs weekends.

    The window is the lookback_days calendar days ending on reference_date.
    Saturday and Sunday count as weekend. An empty partition averages to 0.
    """
    days = windowed_daily_totals(expenses, window_start(reference_date, lookback_days), lookback_days)

    weekend = [d.total for d in days if is_weekend(d.date)]
    weekday = [d.total for d in days if not is_weekend(d.date)]

    return WeekdayWeekendSplit(
        weekday_avg=sum(weekday) / len(weekday) if weekday else 0.0,
        weekend_avg=sum(weekend) / len(weekend) if weekend else 0.0,
    )


def is_weekend_heavier(split: WeekdayWeekendSplit, factor: float = WEEKEND_HEAVIER_FACTOR) -> bool:
    return split.weekend_avg > 0 and split.weekend_avg > split.weekday_avg * factor


def velocity_pct(current_window_total: float, previous_window_total: float) -> float:
    """
    Percent change from the previous window to the current one.

    Returns math.inf when previous is 0 and current is positive, 0 when both are 0.
    """
    if previous_window_total > 0:
        return (current_window_total - previous_window_total) / previous_window_total * 100
    if current_window_total > 0:
        return math.inf
    return 0.0


def remaining(income: float, spent: float) -> float:
    """Signed budget delta; negative means over budget"""
    return income - spent


def runway_days(remaining_amount: float, avg_daily_spend: float) -> float:
    """Whole days the remaining budget lasts at the current pace (inf if nothing is being spent)"""
    if avg_daily_spend <= 0:
        return math.inf
    return float(max(0, math.floor(remaining_amount / avg_daily_spend)))
