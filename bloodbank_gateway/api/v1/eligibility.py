"""POST /v1/eligibility - check whether a donor may donate again"""

import logging
from datetime import date
from fastapi import APIRouter, Depends, HTTPException

from bloodbank_gateway.api.v1.schemas import EligibilityRequest, EligibilityResponse
from bloodbank_gateway.api.dependencies import get_request_id, get_today
from bloodbank_gateway.domain.eligibility import check_eligibility
from bloodbank_gateway.domain.exceptions import InvalidDateRange
from bloodbank_gateway.infrastructure.observability.metrics import domain_error_counter

router = APIRouter()


@router.post("/eligibility", response_model=EligibilityResponse)
def get_eligibility(
    request_body: EligibilityRequest,
    request_id: str = Depends(get_request_id),
    today: date = Depends(get_today),
):
    """
    Evaluate the 56-day donation gap.

    `as_of` defaults to today's date, read here rather than in the domain.
    """
    as_of = request_body.as_of or today

    try:
        result = check_eligibility(request_body.last_donation_date, as_of)
    except InvalidDateRange as e:
        domain_error_counter.labels(error="InvalidDateRange").inc()
        logging.warning(f"Invalid date range: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    return EligibilityResponse(
        eligible=result.eligible,
        next_eligible_date=result.next_eligible_date,
        days_remaining=result.days_remaining,
        message=result.message,
    )
