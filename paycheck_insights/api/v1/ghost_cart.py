"""POST /v1/ghost-cart/valuation - replay skipped purchases as investments"""

import time
import logging
from datetime import date
from fastapi import APIRouter, HTTPException, Request

from paycheck_insights.api.v1.schemas import GhostCartRequest, GhostCartResponse
from paycheck_insights.api.dependencies import get_request_id
from paycheck_insights.domain.ghost_cart import value_ghost_cart
from paycheck_insights.domain.exceptions import InvalidArgumentError
from paycheck_insights.infrastructure.observability.metrics import invalid_input_counter, record_computation
from paycheck_insights.infrastructure.observability.logging import log_computation

router = APIRouter()


@router.post("/ghost-cart/valuation", response_model=GhostCartResponse)
def get_ghost_cart_valuation(request_body: GhostCartRequest, request: Request):
    """Value every ghosted item at the user's expected return as of a date."""
    start_time = time.time()
    request_id = get_request_id(request)
    user_settings = request_body.settings.to_domain()

    try:
        summary = value_ghost_cart(
            [item.to_domain() for item in request_body.items],
            user_settings.expected_annual_return,
            request_body.as_of or date.today(),
            hourly_wage=user_settings.hourly_wage,
        )
    except InvalidArgumentError as e:
        invalid_input_counter.labels(kind="ghost_cart").inc()
        logging.warning(f"Invalid ghost cart input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_computation("ghost_cart")
    log_computation(
        request_id,
        request_body.user_id,
        "ghost_cart",
        (time.time() - start_time) * 1000,
        item_count=len(summary.items),
    )

    return GhostCartResponse.from_domain(summary, user_settings.currency)
