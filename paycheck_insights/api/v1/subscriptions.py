"""POST /v1/subscriptions/danger - subscription danger center"""

import time
import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Request

from paycheck_insights.api.v1.schemas import SubscriptionDangerRequest, SubscriptionDangerResponse
from paycheck_insights.api.dependencies import get_request_id, get_settings
from paycheck_insights.config import Settings
from paycheck_insights.domain.scoring import evaluate_subscriptions
from paycheck_insights.domain.rates import hourly_rate_from_income, income_for_period
from paycheck_insights.domain.time_value import compare_scenarios
from paycheck_insights.domain.exceptions import InvalidArgumentError
from paycheck_insights.infrastructure.observability.metrics import (
    invalid_input_counter,
    record_computation,
    record_danger_subscriptions,
)
from paycheck_insights.infrastructure.observability.logging import log_computation

router = APIRouter()


@router.post("/subscriptions/danger", response_model=SubscriptionDangerResponse)
def get_subscription_danger(
    request_body: SubscriptionDangerRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Flag unused, costly subscriptions and show what cutting them is worth.

    Flow:
    1. Per-subscription monthly cost, spend so far, cost per use, danger flag
    2. Savings from cutting cut_pct of the monthly total
    3. Base vs improved investment curves over the projection horizon
    """
    start_time = time.time()
    request_id = get_request_id(request)
    as_of = request_body.as_of or date.today()
    user_settings = request_body.settings.to_domain()

    try:
        portfolio = evaluate_subscriptions(
            [s.to_domain() for s in request_body.subscriptions],
            {s.id: s.monthly_uses for s in request_body.subscriptions if s.id},
            as_of,
            cut_pct=request_body.cut_pct,
        )
        curves = compare_scenarios(
            config.projection_months,
            user_settings.expected_annual_return,
            request_body.monthly_invest,
            extra_contribution=portfolio.savings,
            initial_boost=request_body.skipped_purchase,
        )
        hourly_rate = hourly_rate_from_income(income_for_period(user_settings), user_settings.pay_frequency)
    except InvalidArgumentError as e:
        invalid_input_counter.labels(kind="subscriptions").inc()
        logging.warning(f"Invalid subscription input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_computation("subscriptions")
    record_danger_subscriptions(portfolio.danger_count)
    log_computation(
        request_id,
        request_body.user_id,
        "subscriptions",
        (time.time() - start_time) * 1000,
        danger_count=portfolio.danger_count,
    )

    return SubscriptionDangerResponse.from_domain(portfolio, hourly_rate, curves)
