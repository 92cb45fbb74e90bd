"""POST /v1/match - rank compatible donors for a blood request"""

import time
import logging
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Request

from bloodbank_gateway.api.v1.schemas import MatchRequest, MatchResponse, DonorCandidateSchema
from bloodbank_gateway.api.dependencies import get_request_id, get_settings
from bloodbank_gateway.config import Settings
from bloodbank_gateway.domain.models import DonorCandidate
from bloodbank_gateway.domain.matching import match_donors
from bloodbank_gateway.domain.exceptions import InvalidBloodType
from bloodbank_gateway.infrastructure.observability.metrics import record_match, domain_error_counter
from bloodbank_gateway.infrastructure.observability.logging import log_match

router = APIRouter()


@router.post("/match", response_model=MatchResponse)
def create_match(
    request_body: MatchRequest,
    request: Request,
    app_settings: Settings = Depends(get_settings),
):
    """
    Rank the caller's donor records for a recipient blood type.

    Flow:
    1. Convert candidate records to domain objects
    2. Filter to available, compatible donors and rank them
    3. Cap the list (request limit, else configured default)
    4. Return the ranked donors; the caller persists the donor IDs
    """
    start_time = time.time()
    request_id = get_request_id(request)

    if len(request_body.candidates) > app_settings.max_candidates_per_request:
        raise HTTPException(
            status_code=413,
            detail=f"At most {app_settings.max_candidates_per_request} candidates per request",
        )

    candidates = [DonorCandidate(**c.model_dump()) for c in request_body.candidates]
    limit = request_body.limit if request_body.limit is not None else app_settings.match_result_limit

    try:
        result = match_donors(
            request_body.blood_type,
            candidates,
            preferred_district=request_body.district,
            preferred_upazila=request_body.upazila,
            limit=limit,
        )
    except InvalidBloodType as e:
        domain_error_counter.labels(error="InvalidBloodType").inc()
        logging.warning(f"Invalid blood type: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=400, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_match(result.total_matched)
    log_match(request_id, result.blood_type.value, len(candidates), result.total_matched, duration_ms)

    return MatchResponse(
        blood_type=result.blood_type.value,
        compatible_types=[t.value for t in result.compatible_types],
        total_matched=result.total_matched,
        donors=[DonorCandidateSchema(**asdict(d)) for d in result.donors],
    )
