"""POST /v1/projection - net worth projection curve"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request

from paycheck_insights.api.v1.schemas import ProjectionRequest, ProjectionResponse, PointSchema
from paycheck_insights.api.dependencies import get_request_id
from paycheck_insights.domain.time_value import project_curve, future_value_of_annuity
from paycheck_insights.domain.exceptions import InvalidArgumentError
from paycheck_insights.infrastructure.observability.metrics import invalid_input_counter, record_computation
from paycheck_insights.infrastructure.observability.logging import log_computation

router = APIRouter()


@router.post("/projection", response_model=ProjectionResponse)
def project_net_worth(request_body: ProjectionRequest, request: Request):
    """
    Project a balance month by month with monthly compounding.

    Returns:
        months + 1 points starting at month 0, plus the future value of the
        contributions alone
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        points = project_curve(
            request_body.months,
            request_body.initial,
            request_body.monthly_contribution,
            request_body.annual_rate,
        )
        annuity = future_value_of_annuity(
            request_body.monthly_contribution,
            request_body.annual_rate,
            request_body.months,
        )
    except InvalidArgumentError as e:
        invalid_input_counter.labels(kind="projection").inc()
        logging.warning(f"Invalid projection input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_computation("projection")
    log_computation(request_id, request_body.user_id, "projection", (time.time() - start_time) * 1000)

    return ProjectionResponse(
        points=[PointSchema(month=p.month, value=p.value) for p in points],
        final_value=points[-1].value,
        contributions_future_value=annuity,
    )
