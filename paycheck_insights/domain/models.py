"""Domain models - pure Python dataclasses for ledger snapshots and derived metrics"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Dict, List, Optional, Union

EXPENSE_CATEGORIES = ("food", "rent", "transport", "subscriptions", "shopping", "other")
PAY_FREQUENCIES = ("weekly", "biweekly", "monthly")
CADENCES = ("monthly", "yearly")

Timestamp = Union[date, datetime]


@dataclass
class UserSettings:
    """Per-user settings driving every derived computation"""

    hourly_wage: float = 30.0
    pay_frequency: str = "biweekly"  # "weekly" | "biweekly" | "monthly"
    currency: str = "CAD"
    expected_annual_return: float = 0.08
    job_satisfaction: int = 7


@dataclass
class Expense:
    """Logged expense row"""

    amount: float
    category: str
    date: date
    note: Optional[str] = None
    expense_id: Optional[str] = None


@dataclass
class Subscription:
    """Recurring charge"""

    amount: float
    cadence: str  # "monthly" or "yearly"
    created_at: Timestamp
    name: str = ""
    subscription_id: Optional[str] = None


@dataclass
class GhostCartItem:
    """A purchase the user chose to skip"""

    price: float
    ghosted_at: Timestamp
    item_id: Optional[str] = None
    title: str = ""


@dataclass
class DailyTotal:
    date: date
    total: float


@dataclass
class ProjectionPoint:
    month: int
    value: float


@dataclass
class ScenarioPoint:
    """Base vs improved projection at one month"""

    month: int
    base: float
    improved: float


@dataclass
class WeekdayWeekendSplit:
    weekday_avg: float
    weekend_avg: float


@dataclass
class GhostCartValuation:
    """Replayed investment value of one ghosted item"""

    item_id: Optional[str]
    price: float
    months_elapsed: int
    invested_value: float
    growth: float
    retirement_days: float


@dataclass
class GhostCartSummary:
    items: List[GhostCartValuation]
    original_total: float
    current_total: float
    growth_bonus: float
    expected_annual_return: float


@dataclass
class SplitComparison:
    """Two-year resale value vs investing the same money instead"""

    resale_year1: float
    resale_year2: float
    invest_year1: float
    invest_year2: float
    opportunity_delta: float
    annual_rate: float


@dataclass
class SubscriptionInsight:
    subscription: Subscription
    monthly_cost: float
    months_so_far: int
    spend_so_far: float
    uses: int
    cost_per_use: float
    unused: bool
    danger: bool


@dataclass
class SubscriptionPortfolio:
    items: List[SubscriptionInsight]
    monthly_total: float
    lifetime_total: float
    danger_count: int
    savings: float


@dataclass
class LifeCostEquivalents:
    """A price expressed in everyday costs"""

    groceries_weeks: float
    flights: float
    rent_months: float


@dataclass
class PurchaseEvaluation:
    price: float
    stress_multiplier: float
    work_time_hours: Optional[float]
    freedom_days: float
    life_cost: LifeCostEquivalents
    split: SplitComparison


@dataclass
class DashboardSummary:
    income: float
    spent: float
    remaining: float
    category_totals: Dict[str, float]
    recent_expenses: List[Expense]
    stress_multiplier: float


@dataclass
class InsightsReport:
    """Everything the insights page shows, computed from one snapshot"""

    income: float
    spent: float
    remaining: float
    spend_rate: float
    remaining_rate: float
    score: float
    score_label: str
    current_totals: List[DailyTotal]
    previous_totals: List[DailyTotal]
    avg_daily_current: float
    avg_daily_previous: float
    velocity_pct: float
    days_to_friday: int
    projected_remaining_friday: float
    split: WeekdayWeekendSplit
    weekend_heavier: bool
    runway_days: float
    category_totals: Dict[str, float] = field(default_factory=dict)
