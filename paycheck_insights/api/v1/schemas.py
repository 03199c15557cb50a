"""Pydantic schemas for API request/response validation"""

from datetime import date, datetime
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from paycheck_insights.domain import models
from paycheck_insights.utils.numeric import finite_or_none

PayFrequency = Literal["weekly", "biweekly", "monthly"]
Cadence = Literal["monthly", "yearly"]
Category = Literal["food", "rent", "transport", "subscriptions", "shopping", "other"]


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class SettingsSchema(BaseModel):
    """User settings snapshot"""

    hourly_wage: float = Field(30.0, ge=0)
    pay_frequency: PayFrequency = "biweekly"
    currency: str = Field("CAD", min_length=3, max_length=3)
    expected_annual_return: float = Field(0.08, ge=0, le=1)
    # Stored values outside 1-10 are accepted and clamped by the engine
    job_satisfaction: int = 7

    def to_domain(self) -> models.UserSettings:
        return models.UserSettings(
            hourly_wage=self.hourly_wage,
            pay_frequency=self.pay_frequency,
            currency=self.currency.upper(),
            expected_annual_return=self.expected_annual_return,
            job_satisfaction=self.job_satisfaction,
        )


class ExpenseSchema(BaseModel):
    id: Optional[str] = None
    amount: float = Field(..., gt=0)
    category: Category
    date: date
    note: Optional[str] = None

    def to_domain(self) -> models.Expense:
        return models.Expense(
            amount=self.amount,
            category=self.category,
            date=self.date,
            note=self.note,
            expense_id=self.id,
        )

    @classmethod
    def from_domain(cls, expense: models.Expense) -> "ExpenseSchema":
        return cls(
            id=expense.expense_id,
            amount=expense.amount,
            category=expense.category,
            date=expense.date,
            note=expense.note,
        )


class SubscriptionSchema(BaseModel):
    id: Optional[str] = None
    name: str = ""
    amount: float = Field(..., gt=0)
    cadence: Cadence = "monthly"
    created_at: Union[datetime, date]
    monthly_uses: int = Field(0, ge=0)

    def to_domain(self) -> models.Subscription:
        return models.Subscription(
            amount=self.amount,
            cadence=self.cadence,
            created_at=self.created_at,
            name=self.name,
            subscription_id=self.id,
        )


class GhostCartItemSchema(BaseModel):
    id: Optional[str] = None
    title: str = ""
    price: float = Field(..., gt=0)
    ghosted_at: Union[datetime, date]

    def to_domain(self) -> models.GhostCartItem:
        return models.GhostCartItem(
            price=self.price,
            ghosted_at=self.ghosted_at,
            item_id=self.id,
            title=self.title,
        )


class LedgerRequest(BaseModel):
    """Request body for POST /v1/dashboard and POST /v1/insights"""

    user_id: Optional[str] = Field(None, description="Resolved user identifier, if any")
    settings: SettingsSchema = Field(default_factory=SettingsSchema)
    expenses: List[ExpenseSchema] = Field(default_factory=list)
    as_of: Optional[date] = Field(None, description="Reference date (defaults to today)")


class ProjectionRequest(BaseModel):
    """Request body for POST /v1/projection"""

    user_id: Optional[str] = None
    months: int = Field(..., ge=0, le=1200)
    initial: float = 0.0
    monthly_contribution: float = 0.0
    annual_rate: float = Field(0.08, ge=0, le=1)


class SubscriptionDangerRequest(BaseModel):
    """Request body for POST /v1/subscriptions/danger"""

    user_id: Optional[str] = None
    settings: SettingsSchema = Field(default_factory=SettingsSchema)
    subscriptions: List[SubscriptionSchema] = Field(default_factory=list)
    cut_pct: float = Field(0.0, ge=0, le=100)
    monthly_invest: float = Field(0.0, ge=0)
    skipped_purchase: float = Field(0.0, ge=0, le=10_000)
    as_of: Optional[date] = None


class GhostCartRequest(BaseModel):
    """Request body for POST /v1/ghost-cart/valuation"""

    user_id: Optional[str] = None
    settings: SettingsSchema = Field(default_factory=SettingsSchema)
    items: List[GhostCartItemSchema] = Field(default_factory=list)
    as_of: Optional[date] = None


class ItemEvaluationRequest(BaseModel):
    """Request body for POST /v1/items/evaluate"""

    user_id: Optional[str] = None
    settings: SettingsSchema = Field(default_factory=SettingsSchema)
    price: float = Field(..., gt=0, description="Resolved catalog or manual price")


# ---------------------------------------------------------------------------
# Outputs (infinite/undefined sentinels are rendered as null)
# ---------------------------------------------------------------------------


class DailyTotalSchema(BaseModel):
    date: date
    total: float


class PointSchema(BaseModel):
    month: int
    value: float


class ScenarioPointSchema(BaseModel):
    month: int
    base: float
    improved: float


class DashboardResponse(BaseModel):
    """Response for POST /v1/dashboard"""

    income: float
    spent: float
    remaining: float
    category_totals: Dict[str, float]
    recent_expenses: List[ExpenseSchema]
    stress_multiplier: float

    @classmethod
    def from_domain(cls, summary: models.DashboardSummary) -> "DashboardResponse":
        return cls(
            income=summary.income,
            spent=summary.spent,
            remaining=summary.remaining,
            category_totals=summary.category_totals,
            recent_expenses=[ExpenseSchema.from_domain(e) for e in summary.recent_expenses],
            stress_multiplier=summary.stress_multiplier,
        )


class InsightsResponse(BaseModel):
    """Response for POST /v1/insights"""

    income: float
    spent: float
    remaining: float
    spend_rate: float
    remaining_rate: float
    score: float
    score_label: str
    current_totals: List[DailyTotalSchema]
    previous_totals: List[DailyTotalSchema]
    avg_daily_current: float
    avg_daily_previous: float
    velocity_pct: Optional[float]
    days_to_friday: int
    projected_remaining_friday: float
    weekday_avg: float
    weekend_avg: float
    weekend_heavier: bool
    runway_days: Optional[float]
    category_totals: Dict[str, float]

    @classmethod
    def from_domain(cls, report: models.InsightsReport) -> "InsightsResponse":
        return cls(
            income=report.income,
            spent=report.spent,
            remaining=report.remaining,
            spend_rate=report.spend_rate,
            remaining_rate=report.remaining_rate,
            score=report.score,
            score_label=report.score_label,
            current_totals=[DailyTotalSchema(date=d.date, total=d.total) for d in report.current_totals],
            previous_totals=[DailyTotalSchema(date=d.date, total=d.total) for d in report.previous_totals],
            avg_daily_current=report.avg_daily_current,
            avg_daily_previous=report.avg_daily_previous,
            velocity_pct=finite_or_none(report.velocity_pct),
            days_to_friday=report.days_to_friday,
            projected_remaining_friday=report.projected_remaining_friday,
            weekday_avg=report.split.weekday_avg,
            weekend_avg=report.split.weekend_avg,
            weekend_heavier=report.weekend_heavier,
            runway_days=finite_or_none(report.runway_days),
            category_totals=report.category_totals,
        )


class ProjectionResponse(BaseModel):
    """Response for POST /v1/projection"""

    points: List[PointSchema]
    final_value: float
    contributions_future_value: float


class SubscriptionInsightSchema(BaseModel):
    id: Optional[str]
    name: str
    cadence: Cadence
    monthly_cost: float
    months_so_far: int
    spend_so_far: float
    uses: int
    cost_per_use: Optional[float]
    unused: bool
    danger: bool


class SubscriptionDangerResponse(BaseModel):
    """Response for POST /v1/subscriptions/danger"""

    items: List[SubscriptionInsightSchema]
    monthly_total: float
    lifetime_total: float
    danger_count: int
    savings: float
    hourly_rate: Optional[float]
    curves: List[ScenarioPointSchema]

    @classmethod
    def from_domain(
        cls,
        portfolio: models.SubscriptionPortfolio,
        hourly_rate: Optional[float],
        curves: List[models.ScenarioPoint],
    ) -> "SubscriptionDangerResponse":
        return cls(
            items=[
                SubscriptionInsightSchema(
                    id=i.subscription.subscription_id,
                    name=i.subscription.name,
                    cadence=i.subscription.cadence,
                    monthly_cost=i.monthly_cost,
                    months_so_far=i.months_so_far,
                    spend_so_far=i.spend_so_far,
                    uses=i.uses,
                    cost_per_use=finite_or_none(i.cost_per_use),
                    unused=i.unused,
                    danger=i.danger,
                )
                for i in portfolio.items
            ],
            monthly_total=portfolio.monthly_total,
            lifetime_total=portfolio.lifetime_total,
            danger_count=portfolio.danger_count,
            savings=portfolio.savings,
            hourly_rate=hourly_rate,
            curves=[ScenarioPointSchema(month=p.month, base=p.base, improved=p.improved) for p in curves],
        )


class GhostCartValuationSchema(BaseModel):
    id: Optional[str]
    price: float
    months_elapsed: int
    invested_value: float
    growth: float
    retirement_days: Optional[float]


class GhostCartResponse(BaseModel):
    """Response for POST /v1/ghost-cart/valuation"""

    currency: str
    expected_annual_return: float
    items: List[GhostCartValuationSchema]
    original_total: float
    current_total: float
    growth_bonus: float

    @classmethod
    def from_domain(cls, summary: models.GhostCartSummary, currency: str) -> "GhostCartResponse":
        return cls(
            currency=currency,
            expected_annual_return=summary.expected_annual_return,
            items=[
                GhostCartValuationSchema(
                    id=v.item_id,
                    price=v.price,
                    months_elapsed=v.months_elapsed,
                    invested_value=v.invested_value,
                    growth=v.growth,
                    retirement_days=finite_or_none(v.retirement_days),
                )
                for v in summary.items
            ],
            original_total=summary.original_total,
            current_total=summary.current_total,
            growth_bonus=summary.growth_bonus,
        )


class SplitComparisonSchema(BaseModel):
    resale_year1: float
    resale_year2: float
    invest_year1: float
    invest_year2: float
    opportunity_delta: float
    annual_rate: float


class LifeCostSchema(BaseModel):
    groceries_weeks: float
    flights: float
    rent_months: float


class ItemEvaluationResponse(BaseModel):
    """Response for POST /v1/items/evaluate"""

    price: float
    currency: str
    stress_multiplier: float
    work_time_hours: Optional[float]
    freedom_days: Optional[float]
    life_cost: LifeCostSchema
    split: SplitComparisonSchema

    @classmethod
    def from_domain(cls, evaluation: models.PurchaseEvaluation, currency: str) -> "ItemEvaluationResponse":
        split = evaluation.split
        return cls(
            price=evaluation.price,
            currency=currency,
            stress_multiplier=evaluation.stress_multiplier,
            work_time_hours=finite_or_none(evaluation.work_time_hours),
            freedom_days=finite_or_none(evaluation.freedom_days),
            life_cost=LifeCostSchema(
                groceries_weeks=evaluation.life_cost.groceries_weeks,
                flights=evaluation.life_cost.flights,
                rent_months=evaluation.life_cost.rent_months,
            ),
            split=SplitComparisonSchema(
                resale_year1=split.resale_year1,
                resale_year2=split.resale_year2,
                invest_year1=split.invest_year1,
                invest_year2=split.invest_year2,
                opportunity_delta=split.opportunity_delta,
                annual_rate=split.annual_rate,
            ),
        )
