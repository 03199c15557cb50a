"""Pay-period income, cadence normalization and work-time conversion"""

from typing import Optional

from paycheck_insights.domain.exceptions import InvalidArgumentError
from paycheck_insights.domain.models import CADENCES, PAY_FREQUENCIES, UserSettings
from paycheck_insights.utils.numeric import clamp, ensure_finite

# Fixed approximations, not calendar-accurate
HOURS_PER_PERIOD = {
    "weekly": 40,
    "biweekly": 80,
    "monthly": 160,
}

MIN_SATISFACTION = 1
MAX_SATISFACTION = 10
STRESS_STEP = 0.1


def hours_for_frequency(pay_frequency: str) -> int:
    if pay_frequency not in PAY_FREQUENCIES:
        raise InvalidArgumentError(f"Unknown pay frequency: {pay_frequency!r}")
    return HOURS_PER_PERIOD[pay_frequency]


def income_for_period(settings: UserSettings) -> float:
    """
    Gross income for one pay period.

    hourly_wage × hours in the period (40 weekly, 80 biweekly, 160 monthly).
    A zero (or negative) wage yields 0 rather than a negative income.
    """
    hours = hours_for_frequency(settings.pay_frequency)
    wage = ensure_finite("hourly_wage", settings.hourly_wage)
    if wage <= 0:
        return 0.0
    return wage * hours


def hourly_rate_from_income(period_income: float, pay_frequency: str = "biweekly") -> Optional[float]:
    """Invert income_for_period; None when there is no income to divide"""
    if period_income <= 0:
        return None
    return period_income / hours_for_frequency(pay_frequency)


def clamp_satisfaction(job_satisfaction: float) -> float:
    return clamp(job_satisfaction, MIN_SATISFACTION, MAX_SATISFACTION)


def stress_multiplier(job_satisfaction: float) -> float:
    """
    Scaling factor applied to work-time conversions.

    Satisfaction 10 → 1.0 (no penalty), satisfaction 1 → 1.9. Out-of-range
    values are clamped first.
    """
    satisfaction = clamp_satisfaction(ensure_finite("job_satisfaction", job_satisfaction))
    return 1 + (MAX_SATISFACTION - satisfaction) * STRESS_STEP


def work_time(amount: float, hourly_wage: float, multiplier: float = 1.0) -> Optional[float]:
    """Hours of labor an amount costs. None (undefined) when hourly_wage <= 0."""
    ensure_finite("amount", amount)
    ensure_finite("hourly_wage", hourly_wage)
    if hourly_wage <= 0:
        return None
    return (amount / hourly_wage) * multiplier


def monthly_cost(amount: float, cadence: str) -> float:
    if cadence not in CADENCES:
        raise InvalidArgumentError(f"Unknown cadence: {cadence!r}")
    return amount / 12 if cadence == "yearly" else amount
