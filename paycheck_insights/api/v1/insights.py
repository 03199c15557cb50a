"""POST /v1/dashboard and POST /v1/insights - ledger summaries and insight signals"""

import time
import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Request

from paycheck_insights.api.v1.schemas import LedgerRequest, DashboardResponse, InsightsResponse
from paycheck_insights.api.dependencies import get_request_id, get_settings
from paycheck_insights.config import Settings
from paycheck_insights.domain.insights import build_dashboard_summary, build_insights_report
from paycheck_insights.domain.exceptions import InvalidArgumentError
from paycheck_insights.infrastructure.observability.metrics import (
    invalid_input_counter,
    record_computation,
    record_health_score,
)
from paycheck_insights.infrastructure.observability.logging import log_computation

router = APIRouter()


@router.post("/dashboard", response_model=DashboardResponse)
def get_dashboard(
    request_body: LedgerRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """Period income vs the most recent expenses, with category totals."""
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        summary = build_dashboard_summary(
            request_body.settings.to_domain(),
            [e.to_domain() for e in request_body.expenses],
            recent_limit=config.recent_expenses_limit,
        )
    except InvalidArgumentError as e:
        invalid_input_counter.labels(kind="dashboard").inc()
        logging.warning(f"Invalid dashboard input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_computation("dashboard")
    log_computation(
        request_id,
        request_body.user_id,
        "dashboard",
        (time.time() - start_time) * 1000,
        expense_count=len(summary.recent_expenses),
    )

    return DashboardResponse.from_domain(summary)


@router.post("/insights", response_model=InsightsResponse)
def get_insights(
    request_body: LedgerRequest,
    request: Request,
    config: Settings = Depends(get_settings),
):
    """
    Compute insight signals for one ledger snapshot.

    Flow:
    1. Resolve the reference date (request as_of, else today)
    2. Build the insights report (health score, trends, forecast)
    3. Record score metrics and log the outcome
    """
    start_time = time.time()
    request_id = get_request_id(request)
    today = request_body.as_of or date.today()

    try:
        report = build_insights_report(
            request_body.settings.to_domain(),
            [e.to_domain() for e in request_body.expenses],
            today,
            lookback_days=config.insights_lookback_days,
            trend_days=config.trend_window_days,
        )
    except InvalidArgumentError as e:
        invalid_input_counter.labels(kind="insights").inc()
        logging.warning(f"Invalid insights input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_computation("insights")
    record_health_score(report.score, report.score_label)
    log_computation(
        request_id,
        request_body.user_id,
        "insights",
        (time.time() - start_time) * 1000,
        health_score=report.score,
        score_label=report.score_label,
    )

    return InsightsResponse.from_domain(report)
