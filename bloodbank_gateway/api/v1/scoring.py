"""Gamification endpoints - points, badges, and donation recording"""

import logging
from dataclasses import asdict
from typing import Iterable, List
from fastapi import APIRouter, Depends, HTTPException

from bloodbank_gateway.api.v1.schemas import (
    BadgeCatalogResponse,
    BadgeSchema,
    DonationRequest,
    DonationResponse,
    ScoreRequest,
    ScoreResponse,
)
from bloodbank_gateway.api.dependencies import get_request_id
from bloodbank_gateway.domain.models import BadgeId, DonorProfile, ScoringInput
from bloodbank_gateway.domain.scoring import BADGES, get_badge_details, record_donation, score
from bloodbank_gateway.domain.exceptions import InvalidInput
from bloodbank_gateway.infrastructure.observability.metrics import (
    domain_error_counter,
    record_donation as record_donation_metrics,
)
from bloodbank_gateway.infrastructure.observability.logging import log_donation_scored

router = APIRouter()


def _badge_schemas(badge_ids: Iterable[BadgeId]) -> List[BadgeSchema]:
    return [
        BadgeSchema(**{**asdict(badge), "id": badge.id.value})
        for badge in get_badge_details(badge_ids)
    ]


def _reject(e: InvalidInput, request_id: str) -> HTTPException:
    domain_error_counter.labels(error="InvalidInput").inc()
    logging.warning(f"Invalid input: {e}", extra={"request_id": request_id})
    return HTTPException(status_code=400, detail=str(e))


@router.get("/badges", response_model=BadgeCatalogResponse)
def list_badges():
    """Badge catalogue in display order"""
    return BadgeCatalogResponse(badges=_badge_schemas(b.id for b in BADGES))


@router.post("/score", response_model=ScoreResponse)
def score_donor(request_body: ScoreRequest, request_id: str = Depends(get_request_id)):
    """Compute a donor's points and badges from stored counters and flags"""
    try:
        result = score(ScoringInput(**request_body.model_dump()))
    except InvalidInput as e:
        raise _reject(e, request_id)

    return ScoreResponse(points=result.points, badges=_badge_schemas(result.badges))


@router.post("/donations", response_model=DonationResponse)
def create_donation(request_body: DonationRequest, request_id: str = Depends(get_request_id)):
    """
    Recompute a donor's totals for a newly recorded donation.

    Flow:
    1. Build a profile snapshot from the stored values in the body
    2. Increment the donation count and rescore
    3. Return the values the caller should persist on the donor profile
    """
    try:
        held = frozenset(b.id for b in get_badge_details(request_body.badges))
        profile = DonorProfile(
            total_donations=request_body.total_donations,
            is_verified=request_body.is_verified,
            is_available=request_body.is_available,
            district=request_body.district,
            upazila=request_body.upazila,
            blood_type=request_body.blood_type,
            badges=held,
        )
        outcome = record_donation(profile, request_body.donation_date)
    except InvalidInput as e:
        raise _reject(e, request_id)

    new_badges = [b.value for b in outcome.new_badges]
    record_donation_metrics(new_badges)
    log_donation_scored(request_id, outcome.total_donations, outcome.points, new_badges)

    return DonationResponse(
        total_donations=outcome.total_donations,
        points=outcome.points,
        points_awarded=outcome.points_awarded,
        badges=_badge_schemas(outcome.badges),
        new_badges=_badge_schemas(outcome.new_badges),
        last_donation_date=outcome.last_donation_date,
    )
