"""POST /v1/items/evaluate - work time, life cost and buy-vs-invest for one item"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request

from paycheck_insights.api.v1.schemas import ItemEvaluationRequest, ItemEvaluationResponse
from paycheck_insights.api.dependencies import get_request_id
from paycheck_insights.domain.purchases import evaluate_purchase
from paycheck_insights.domain.exceptions import InvalidArgumentError
from paycheck_insights.infrastructure.observability.metrics import invalid_input_counter, record_computation
from paycheck_insights.infrastructure.observability.logging import log_computation

router = APIRouter()


@router.post("/items/evaluate", response_model=ItemEvaluationResponse)
def evaluate_item(request_body: ItemEvaluationRequest, request: Request):
    start_time = time.time()
    request_id = get_request_id(request)
    user_settings = request_body.settings.to_domain()

    try:
        evaluation = evaluate_purchase(request_body.price, user_settings)
    except InvalidArgumentError as e:
        invalid_input_counter.labels(kind="item").inc()
        logging.warning(f"Invalid item input: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    record_computation("item")
    log_computation(request_id, request_body.user_id, "item", (time.time() - start_time) * 1000)

    return ItemEvaluationResponse.from_domain(evaluation, user_settings.currency)
