"""GET /v1/compatibility/{blood_type} - compatible donor and recipient groups"""

import logging
from fastapi import APIRouter, Depends, HTTPException

from bloodbank_gateway.api.v1.schemas import CompatibilityResponse
from bloodbank_gateway.api.dependencies import get_request_id
from bloodbank_gateway.domain.compatibility import (
    compatible_donor_types,
    compatible_recipient_types,
    parse_blood_type,
    sort_blood_types,
)
from bloodbank_gateway.domain.exceptions import InvalidBloodType
from bloodbank_gateway.infrastructure.observability.metrics import domain_error_counter

router = APIRouter()


@router.get("/compatibility/{blood_type}", response_model=CompatibilityResponse)
def get_compatibility(blood_type: str, request_id: str = Depends(get_request_id)):
    """
    Look up which groups a blood type can receive from and donate to.

    Positive types must be URL-encoded ("A%2B").
    """
    try:
        parsed = parse_blood_type(blood_type)
    except InvalidBloodType as e:
        domain_error_counter.labels(error="InvalidBloodType").inc()
        logging.warning(f"Invalid blood type: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    return CompatibilityResponse(
        blood_type=parsed.value,
        can_receive_from=[t.value for t in sort_blood_types(compatible_donor_types(parsed))],
        can_donate_to=[t.value for t in sort_blood_types(compatible_recipient_types(parsed))],
    )
